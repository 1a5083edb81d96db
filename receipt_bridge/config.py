from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

from receipt_bridge import __version__


class Settings(BaseSettings):
    """Application settings."""

    # HTTP service
    host: str = "0.0.0.0"
    port: int = 9100
    version: str = __version__
    cors_allowed_origins: str = "*"
    open_browser: bool = False

    # Printer device
    printer_port: str = "LPT1"
    device_paths: list[str] = []  # empty -> naming conventions for the host OS
    codepage: str = "gbk"
    write_timeout: float = 10.0  # seconds

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "RECEIPT_BRIDGE_"
        extra = "ignore"


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the service.

    Args:
        level: Log level name; defaults to the configured ``log_level``
    """
    level_name = (level or get_settings().log_level).upper()
    resolved = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    logging.getLogger("receipt_bridge").setLevel(resolved)


# ============================================================================
# Encoder Capabilities
# ============================================================================

# Barcode symbologies the encoder can frame
SUPPORTED_SYMBOLOGIES = [
    "CODE128",  # Any ASCII, length-prefixed
    "CODE39",   # Upper-case letters, digits, - . $ / + % space
    "EAN13",    # Exactly 13 digits
    "EAN8",     # Exactly 8 digits
]


def get_features(codepage: str) -> list[str]:
    """List the capabilities advertised by the status endpoint.

    Args:
        codepage: Device code page used for text transcoding

    Returns:
        Feature names, starting with the job kinds
    """
    return ["text", "barcode", f"{codepage.lower()}-encoding", *(s.lower() for s in SUPPORTED_SYMBOLOGIES)]
