"""
Porter Lab - Porter stemming for text-processing pipelines.

Components:
- stemmer: the classic Porter (1980) algorithm, five ordered suffix steps
- backends: swappable stemmer implementations (porter, nltk snowball)
- tokenizer: letter-run text driver and stopword-filtering tokenizer
- settings / logging_config / bootstrap: env-based configuration and logging

Quick use:
    >>> from porterlab import stem
    >>> stem("capabilities")
    'capabl'
"""

from .stemmer import PorterStemmer, stem
from .tokenizer import stem_text, tokenize
from .backends import get_stemmer

__version__ = "0.1.0"

__all__ = [
    "PorterStemmer",
    "stem",
    "stem_text",
    "tokenize",
    "get_stemmer",
]
