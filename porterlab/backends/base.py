"""
Abstract base class for stemmer backends.

All stemmers must implement this interface to be swappable.
"""

from abc import ABC, abstractmethod


class BaseStemmer(ABC):
    """
    Abstract base class for stemmer backends.

    All stemmers must implement this interface to be swappable.
    """

    @abstractmethod
    def stem(self, word: str) -> str:
        """
        Reduce a word to its stem.

        Args:
            word: Single word (letters only)

        Returns:
            Lowercase stem
        """
        pass

    @abstractmethod
    def get_info(self) -> dict:
        """
        Get information about the stemmer.

        Returns:
            Dict with keys: name, type, ...
        """
        pass

    def close(self):
        """Optional cleanup"""
        pass
