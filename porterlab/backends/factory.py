"""
Factory to create stemmer instances based on configuration.
"""

from typing import Optional
import os
import logging

from .base import BaseStemmer
from .porter import PorterBackend
from .snowball import SnowballBackend

logger = logging.getLogger(__name__)

VALID_TYPES = ("porter", "snowball")


class StemmerFactory:
    """Factory to create stemmer instances based on configuration."""

    _instance: Optional[BaseStemmer] = None  # Singleton cache

    @classmethod
    def create(cls, force_reload: bool = False, stemmer_type: Optional[str] = None) -> BaseStemmer:
        """
        Create stemmer based on environment configuration.

        Config (env vars):
            STEMMER_TYPE: "porter" | "snowball" (default: porter)

        Supported types:
            - porter: classic Porter algorithm (built-in, default)
            - snowball: NLTK Snowball/Porter2 for English

        Args:
            force_reload: If True, recreate instance even if cached
            stemmer_type: Overrides STEMMER_TYPE when given

        Returns:
            Stemmer instance
        """
        # Return cached instance
        if cls._instance is not None and not force_reload:
            logger.debug(f"Returning cached stemmer instance: {cls._instance}")
            return cls._instance

        if stemmer_type is None:
            stemmer_type = os.getenv("STEMMER_TYPE", "porter")
        stemmer_type = stemmer_type.strip().lower()
        if not stemmer_type:
            raise ValueError("STEMMER_TYPE environment variable must not be empty")

        try:
            if stemmer_type == "porter":
                logger.info("Creating Porter stemmer")
                instance = PorterBackend()

            elif stemmer_type == "snowball":
                logger.info("Creating Snowball stemmer (nltk, english)")
                instance = SnowballBackend(language="english")

            else:
                raise ValueError(
                    f"Unknown stemmer type: {stemmer_type}. "
                    f"Valid options: {', '.join(VALID_TYPES)}"
                )

        except Exception as e:
            logger.error(f"Failed to create stemmer ({stemmer_type}): {e}")
            raise

        if cls._instance is not None:
            cls._instance.close()
        cls._instance = instance
        return cls._instance

    @classmethod
    def cleanup(cls):
        """Cleanup cached stemmer instance."""
        if cls._instance is not None:
            logger.info("Cleaning up stemmer instance")
            cls._instance.close()
            cls._instance = None
