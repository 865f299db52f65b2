"""Manages configuration variables.

This module provides:
- Config: a base class for pulling environment variables
- DevelopmentConfig: a dev config class for test environments
- ProductionConfig: a config class for production
- TestingConfig: a config class for the test suite
- config: a dict for getting configuration depending on environment
"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base class for pulling environment variables."""

    LOG_DIR = os.getenv("ULYS_LOG_DIR", "")

    LOG_REQUESTS = os.getenv("ULYS_LOG_REQUESTS", "False").lower() == "true"

    MAX_COUNT = int(os.getenv("ULYS_MAX_COUNT", "1000"))

    OVERFLOW_SLEEP_MS = int(os.getenv("ULYS_OVERFLOW_SLEEP_MS", "1"))


class DevelopmentConfig(Config):
    """Config class with DEBUG on."""

    DEBUG = True


class ProductionConfig(Config):
    """Config class with DEBUG off."""

    DEBUG = False


class TestingConfig(Config):
    """Config class for the test client, no log files."""

    DEBUG = False
    TESTING = True
    LOG_DIR = ""
    MAX_COUNT = 50


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
