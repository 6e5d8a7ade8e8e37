"""
Configuration module for AlfredChat application.
Stores the environment-driven settings of the application.
"""

import os
from typing import Dict, Any, Optional


class Config:
    """Application configuration class."""

    # Logging preset (development, production, testing)
    ENV = os.environ.get("ALFRED_ENV", "development").lower()

    # Overrides the preset's level when set
    LOG_LEVEL: Optional[str] = os.environ.get("ALFRED_LOG_LEVEL") or None

    # File logging is enabled only when a directory is given
    LOG_DIR: Optional[str] = os.environ.get("ALFRED_LOG_DIR") or None

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """Get all configuration values as a dictionary."""
        return {
            "ENV": cls.ENV,
            "LOG_LEVEL": cls.LOG_LEVEL,
            "LOG_DIR": cls.LOG_DIR,
        }


# Create config instance
config = Config()
