"""
Centralized configuration module for application-wide settings.

Values are read from environment variables. The application factory calls
`load_environment()` first so a local `.env` file can provide them.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

TRUTHY_VALUES = ("true", "1", "yes")


def load_environment(env_file: Optional[str] = None) -> bool:
    """
    Load variables from a .env file without overriding the real environment.

    Returns:
        bool: True if a file was found and loaded
    """
    if env_file is not None:
        return load_dotenv(env_file, override=False)
    return load_dotenv(override=False)


def get_bool_env(name: str, default: bool = False) -> bool:
    """Read a boolean flag; "true", "1" and "yes" are truthy (case-insensitive)."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY_VALUES


# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the application timezone from environment variable.

    Returns:
        ZoneInfo: Application timezone (defaults to UTC if not configured)

    Environment Variables:
        TZ: Timezone identifier (e.g., 'Asia/Kolkata', 'UTC')
            Default: 'UTC'

    Bill timestamps are taken in this timezone.
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


# ===========================
# Logging Configuration
# ===========================


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").strip().upper()


def get_log_dir() -> Path:
    return Path(os.getenv("LOG_DIR", "logs"))


# ===========================
# Credential Configuration
# ===========================


def get_clinic_credentials() -> Optional[tuple[str, str]]:
    """
    Get the fixed username/password pair guarding write endpoints.

    Returns:
        (username, password), or None when either variable is unset,
        which disables the check.

    Environment Variables:
        CLINIC_USERNAME: Login name for the front desk
        CLINIC_PASSWORD: Matching password
    """
    username = os.getenv("CLINIC_USERNAME", "").strip()
    password = os.getenv("CLINIC_PASSWORD", "")

    if not username or not password:
        return None

    return username, password


def log_startup_config(credentials_enabled: bool) -> None:
    """
    Log the active configuration.

    Should be called during application startup; credentials themselves are
    never logged.
    """
    logger.info(
        "Clinic configuration initialized",
        extra={
            "context": {
                "timezone": str(get_app_timezone()),
                "log_level": get_log_level(),
                "credentials_enabled": credentials_enabled,
            }
        },
    )
    if not credentials_enabled:
        logger.warning(
            "CLINIC_USERNAME/CLINIC_PASSWORD not configured - write endpoints are open",
            extra={"context": {"component": "config"}},
        )
