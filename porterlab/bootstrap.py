"""
One-call startup: environment, logging and the stemmer backend.
"""

import logging
from pathlib import Path
from typing import Optional

from .backends import StemmerFactory
from .logging_config import setup_logging
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)


def bootstrap(root: Optional[Path] = None) -> Settings:
    """
    Load settings, configure logging and create the configured stemmer.

    Args:
        root: Directory holding .env.local / .env (default: project root)

    Returns:
        The loaded Settings
    """
    settings = load_settings(root)
    setup_logging(
        log_file=settings.log_file,
        console_level=settings.console_level,
        file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
    )
    stemmer = StemmerFactory.create(force_reload=True, stemmer_type=settings.stemmer_type)
    logger.info(f"Stemmer ready: {stemmer.get_info()}")
    return settings
