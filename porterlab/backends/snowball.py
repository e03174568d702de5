"""
Snowball Stemmer for English (via NLTK).

Uses the Snowball stemming algorithm (improved Porter2 stemmer):
https://snowballstem.org/

Kept next to the classic Porter backend for comparison. Porter2 handles
some endings differently:
- "generously" → "generous" (Porter: "gener")
- "running" → "run" (same)
"""

from nltk.stem.snowball import SnowballStemmer

from .base import BaseStemmer


class SnowballBackend(BaseStemmer):
    """NLTK Snowball (Porter2) stemmer"""

    def __init__(self, language: str = "english"):
        self.language = language
        # Thread-safe, reusable
        self._stemmer = SnowballStemmer(language)

    def stem(self, word: str) -> str:
        return self._stemmer.stem(word)

    def get_info(self) -> dict:
        return {
            "name": "snowball",
            "type": "nltk",
            "language": self.language,
        }

    def __repr__(self):
        return f"SnowballBackend(language={self.language!r})"
