"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the copy
engine.

Usage:
    from structcopy.config import EngineSettings

    # Load from environment variables (STRUCTCOPY_*)
    settings = EngineSettings()

    # Or override with explicit values
    settings = EngineSettings(none_fits_any=False)
    engine = CopyEngine(settings)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the structural copy engine.

    Attributes:
        cache_members: Memoise member tables per (class, include_private).
        none_fits_any: Allow None to be written into members of any declared type.
        numeric_promotion: Accept int where float/complex is declared, and float
            where complex is declared (PEP 484), both when matching members
            and when checking values before a write.

    Environment Variables:
        STRUCTCOPY_CACHE_MEMBERS
        STRUCTCOPY_NONE_FITS_ANY
        STRUCTCOPY_NUMERIC_PROMOTION
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cache_members: bool = True
    none_fits_any: bool = True
    numeric_promotion: bool = True
