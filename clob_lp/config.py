"""
Configuration settings for the ladder engine

Loads environment variables and provides defaults for the request schema
and the preview script.
"""
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Engine settings"""

    # Ladder bound applied when a request does not set max_price_points
    MAX_PRICE_POINTS: int = int(os.getenv("CLOB_LP_MAX_PRICE_POINTS", 200))

    # Shape used when a request does not name one
    DEFAULT_SHAPE: str = os.getenv("CLOB_LP_DEFAULT_SHAPE", "flat").lower()

    # Logging
    LOG_LEVEL: str = os.getenv("CLOB_LP_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# Create global settings instance
settings = Settings()
