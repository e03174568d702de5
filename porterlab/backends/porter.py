"""
Classic Porter stemmer backend (built-in, zero dependencies).
"""

from .base import BaseStemmer
from ..stemmer import PorterStemmer


class PorterBackend(BaseStemmer):
    """Rule-based Porter (1980) stemmer"""

    def __init__(self):
        self._stemmer = PorterStemmer()

    def stem(self, word: str) -> str:
        return self._stemmer.stem(word)

    def get_info(self) -> dict:
        return {
            "name": "porter",
            "type": "rule-based",
            "steps": 5,
        }

    def __repr__(self):
        return "PorterBackend()"
