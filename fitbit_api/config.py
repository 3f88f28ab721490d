"""Configuration management for fitbit_api."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _get_int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Config:
    """Application configuration."""

    # Base paths
    BASE_DIR = Path(__file__).parent.parent
    LOGS_DIR = BASE_DIR / "logs"

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_TO_FILE = os.environ.get("FITBIT_LOG_TO_FILE", "1").lower() not in ("0", "false", "no")

    # API endpoints
    API_BASE_URL = os.environ.get("FITBIT_API_BASE_URL", "https://api.fitbit.com")
    TOKEN_URL = os.environ.get("FITBIT_TOKEN_URL", "https://api.fitbit.com/oauth2/token")

    # OAuth2 credentials
    CLIENT_ID = os.environ.get("FITBIT_CLIENT_ID")
    CLIENT_SECRET = os.environ.get("FITBIT_CLIENT_SECRET")
    ACCESS_TOKEN = os.environ.get("FITBIT_ACCESS_TOKEN")
    REFRESH_TOKEN = os.environ.get("FITBIT_REFRESH_TOKEN")
    USER_ID = os.environ.get("FITBIT_USER_ID", "-")

    # API Settings
    REQUEST_TIMEOUT = _get_int_env("FITBIT_REQUEST_TIMEOUT", 30)  # seconds
    # Fitbit rejects list requests outside 1..100 entries per page
    MAX_PAGE_LIMIT = 100

    @classmethod
    def ensure_directories(cls):
        """Ensure all required directories exist."""
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    def __repr__(self):
        return f"Config(API_BASE_URL={self.API_BASE_URL}, USER_ID={self.USER_ID})"
