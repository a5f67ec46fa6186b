"""
Encoding Constants and Environment Configuration

Fixed values shared by the encoders (selector length, slot width, default
placeholders) and the environment-driven settings of the library.

Environment variables (a local ``.env`` file is honoured):
    WYVERN_LOG_LEVEL:         Level name for the ``wyvern_schemas`` logger (default ``WARNING``).
    WYVERN_STRICT_ADDRESSES:  When true, mixed-case addresses failing the EIP-55
                              checksum are rejected instead of normalised.
"""

import os
import logging
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, field_validator
import dotenv

from .engine.exceptions import ConfigurationError

dotenv.load_dotenv()

# ---------------------------------------------------------------------------
# ABI layout
# ---------------------------------------------------------------------------

#: Length of the method selector prefixed to every call.
SELECTOR_LENGTH: int = 4

#: Width of a single static ABI parameter slot.
SLOT_SIZE: int = 32

#: Mask byte marking a calldata byte the matcher may replace.
MASK_REPLACE: int = 0xFF

#: Mask byte marking a calldata byte that must match exactly.
MASK_KEEP: int = 0x00

# ---------------------------------------------------------------------------
# Default placeholders
# ---------------------------------------------------------------------------

#: Null address is sometimes rejected by transfer implementations.
DEFAULT_ADDRESS: str = "0x" + "11" * 20

DEFAULT_BYTES32: bytes = b"\x00" * 32

EMPTY_PATTERN: str = "0x"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class EncoderSettings(BaseModel):
    """Runtime switches read from the environment."""
    log_level: str = Field(default="WARNING", description="Level name for the package logger")
    strict_addresses: bool = Field(default=False, description="Reject non-checksummed mixed-case addresses")

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def _parse_bool(name: str, raw: Optional[str]) -> bool:
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


@lru_cache(maxsize=1)
def get_settings() -> EncoderSettings:
    """
    Load encoder settings from environment variables.

    The result is cached; call ``get_settings.cache_clear()`` after changing
    the environment.

    Returns:
        EncoderSettings: Parsed settings.

    Raises:
        ConfigurationError: If a variable holds an invalid value.
    """
    try:
        return EncoderSettings(
            log_level=os.getenv("WYVERN_LOG_LEVEL", "WARNING"),
            strict_addresses=_parse_bool("WYVERN_STRICT_ADDRESSES", os.getenv("WYVERN_STRICT_ADDRESSES")),
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid encoder configuration: {e}") from e


PACKAGE_LOGGER = "wyvern_schemas"


def _package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())
    return package_logger


def init_logging() -> logging.Logger:
    """
    Prepare the package logger at import time.

    Only attaches a ``NullHandler``; the level is left to the application
    unless ``WYVERN_LOG_LEVEL`` names a valid level. An invalid value is not
    reported here, it surfaces from ``get_settings()`` when first used.
    """
    package_logger = _package_logger()
    level = os.getenv("WYVERN_LOG_LEVEL", "").strip().upper()
    if level and isinstance(logging.getLevelName(level), int):
        package_logger.setLevel(level)
    return package_logger


def configure_logging(settings: Optional[EncoderSettings] = None) -> logging.Logger:
    """
    Attach a ``NullHandler`` to the package logger and apply the configured level.

    Applications remain responsible for installing real handlers.

    Raises:
        ConfigurationError: If the environment holds invalid settings.
    """
    settings = settings or get_settings()
    package_logger = _package_logger()
    package_logger.setLevel(settings.log_level)
    return package_logger
