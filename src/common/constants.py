"""Shared constants for the library API.

For environment-based configuration (port, CORS, etc.), use the env module:
    from common.env import env
    port = env.api_port()
"""

APP_NAME = "Library Graph API"
APP_VERSION = "0.1.0"

# Server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
GRAPHQL_PATH = "/graphql"

# Frontend dev servers
DEFAULT_CORS_ORIGINS: list[str] = [
    "http://localhost:3000",
    "http://localhost:3001",
]

# Accepted ID_STRATEGY values
ID_STRATEGIES: tuple[str, ...] = ("counter", "length")
