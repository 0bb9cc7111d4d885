"""Configuration module using Pydantic Settings.

Provides typed configuration for the copy engine with environment variable
support.

Usage:
    from structcopy.config import EngineSettings

    settings = EngineSettings(cache_members=False)
"""

from structcopy.config.settings import EngineSettings

__all__ = [
    "EngineSettings",
]
