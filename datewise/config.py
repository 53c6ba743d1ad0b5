"""Configuration loader for the date service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults.

    Attributes:
        default_timezone: Zone used when a request names none.
        default_locale: Locale used when a request names none.
        log_level: Level name applied by ``configure_logging``.
    """

    default_timezone: str = "UTC"
    default_locale: str = "en-US"
    log_level: str = "INFO"


def load_settings(env_file: str | None = ".env") -> Settings:
    """Load settings from the environment, after an optional dotenv file.

    Variables already set in the environment win over the dotenv file.

    Args:
        env_file: Path to a dotenv file, or None to skip it. A missing
            file is ignored.

    Returns:
        Settings built from DATEWISE_TIMEZONE (falling back to TZ, then
        "UTC"), DATEWISE_LOCALE and DATEWISE_LOG_LEVEL.
    """
    if env_file is not None:
        load_dotenv(env_file)

    settings = Settings(
        default_timezone=(
            os.getenv("DATEWISE_TIMEZONE") or os.getenv("TZ") or "UTC"
        ).strip(),
        default_locale=os.getenv("DATEWISE_LOCALE", "en-US").strip(),
        log_level=os.getenv("DATEWISE_LOG_LEVEL", "INFO").strip().upper(),
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger.

    Library code never calls this; it is for processes embedding the
    service that have no logging setup of their own.
    """
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


__all__ = ["Settings", "load_settings", "configure_logging"]
