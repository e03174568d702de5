"""
Runtime settings loaded from environment variables.

Environment is read from .env.local (local dev) or .env, falling back to
system environment variables only.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Porter Lab configuration"""
    stemmer_type: str = "porter"
    log_level: str = "INFO"
    log_file: str = "logs/porter-lab.log"

    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level)


def load_env(root: Optional[Path] = None) -> Optional[Path]:
    """
    Load .env.local first (highest priority), then .env as fallback.

    Returns:
        Path of the loaded file, or None if neither exists
    """
    root = Path(root) if root else PROJECT_ROOT
    env_local = root / ".env.local"
    env_file = root / ".env"

    if env_local.exists():
        load_dotenv(env_local, override=True)
        return env_local
    if env_file.exists():
        load_dotenv(env_file, override=True)
        return env_file
    return None


def load_settings(root: Optional[Path] = None) -> Settings:
    """
    Build Settings from the environment.

    Config (env vars):
        STEMMER_TYPE: "porter" | "snowball" (default: porter)
        LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL (default: INFO)
        LOG_FILE: Base log file path (default: logs/porter-lab.log)

    Raises:
        ValueError: On an unknown log level or an empty stemmer type
    """
    loaded = load_env(root)
    if loaded:
        logger.info(f"Loaded environment from: {loaded}")
    else:
        logger.debug("No .env.local or .env file found - using system environment variables only")

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Unknown LOG_LEVEL: {log_level}. "
            f"Valid options: {', '.join(VALID_LOG_LEVELS)}"
        )

    stemmer_type = os.getenv("STEMMER_TYPE", "porter").strip().lower()
    if not stemmer_type:
        raise ValueError("STEMMER_TYPE environment variable must not be empty")

    return Settings(
        stemmer_type=stemmer_type,
        log_level=log_level,
        log_file=os.getenv("LOG_FILE", "logs/porter-lab.log"),
    )
