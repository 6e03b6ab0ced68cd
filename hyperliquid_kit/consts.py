"""Network endpoints and numeric constants."""

MAINNET_API_URL = "https://api.hyperliquid.xyz"
TESTNET_API_URL = "https://api.hyperliquid-testnet.xyz"
LOCAL_API_URL = "http://localhost:3001"

EPSILON = 1e-9

# One basis point above 100%, used as an "unbounded" marker.
INF_BPS = 10_001