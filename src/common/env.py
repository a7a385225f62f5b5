"""Environment configuration interface for the library API.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

from common.constants import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ID_STRATEGIES,
)

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def api_host() -> str:
        """Get the host the API server binds to.

        Returns:
            Bind host, defaults to '127.0.0.1'
        """
        return os.getenv("API_HOST", DEFAULT_HOST)

    @staticmethod
    def api_port() -> int:
        """Get the port the API server listens on.

        Returns:
            Port number, defaults to 8000
        """
        return int(os.getenv("API_PORT", str(DEFAULT_PORT)))

    @staticmethod
    def cors_origins() -> list[str]:
        """Get the origins allowed by the CORS middleware.

        Returns:
            List of origins parsed from the comma-separated CORS_ORIGINS value
        """
        raw = os.getenv("CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS))
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    @staticmethod
    def graphiql_enabled() -> bool:
        """Whether the GraphiQL explorer is served on the GraphQL endpoint.

        Returns:
            False only when GRAPHIQL_ENABLED is '0', 'false' or 'no'
        """
        return os.getenv("GRAPHIQL_ENABLED", "true").lower() not in ("0", "false", "no")

    @staticmethod
    def id_strategy() -> str:
        """Get the id assignment strategy for new records.

        Returns:
            'counter' (default) or 'length'

        Raises:
            ValueError: If ID_STRATEGY is set to anything else
        """
        value = os.getenv("ID_STRATEGY", "counter").lower()
        if value not in ID_STRATEGIES:
            raise ValueError(
                f"Invalid ID_STRATEGY '{value}': expected one of {', '.join(ID_STRATEGIES)}"
            )
        return value

    @staticmethod
    def log_level() -> str:
        """Get the logging level.

        Returns:
            Level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton instance for convenient access
env = Environment()
