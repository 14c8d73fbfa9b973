"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration; in a deployment you should at
least override the Basic authentication credentials.

``create_app`` accepts a ``Settings`` instance, which lets tests build
an application against a temporary database without touching the
environment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "TSSE Training API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to console output.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database.  Relative paths are resolved against
    # the package root by ``core.db.resolve_database_path``.
    database_url: str = os.getenv("DATABASE_URL", "tsse.db")

    # Single HTTP Basic credential pair accepted by every /api route.
    auth_username: str = os.getenv("AUTH_USERNAME", "tsse")
    auth_password: str = os.getenv("AUTH_PASSWORD", "sport")

    # Comma‑separated list of allowed CORS origins, ``*`` for any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma‑separated CORS origins into a list."""
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so the runner and the default application
# can import it.  Environment variables must be set before importing
# this module.
settings = Settings()
