"""
Text driver and tokenizer around the stemmer.

The stemmer itself only understands single words made of ASCII letters.
This module does the splitting:

stem_text():
    Stems every run of letters in a text and copies everything else
    (spaces, digits, punctuation) through unchanged, so the output lines
    up with the input.

tokenize() pipeline:
1. Lowercase conversion
2. Extract letter-only words
3. Filter stopwords (common English words)
4. Apply stemming (reduce to root form: "connections" → "connect")
5. Return list of meaningful tokens
"""

import logging
import re
from typing import Iterator, List, Optional, Tuple

from .backends import BaseStemmer, get_stemmer

logger = logging.getLogger(__name__)

# English stopwords (based on Elasticsearch/Lucene standard list)
# These are common words that don't help with ranking
STOPWORDS = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'but', 'by',
    'for', 'if', 'in', 'into', 'is', 'it',
    'no', 'not', 'of', 'on', 'or', 'such',
    'that', 'the', 'their', 'then', 'there', 'these',
    'they', 'this', 'to', 'was', 'will', 'with'
])

# Maximal runs of ASCII letters, or of anything else
_RUN_PATTERN = re.compile(r'[A-Za-z]+|[^A-Za-z]+')


def iter_letter_runs(text: str) -> Iterator[Tuple[bool, str]]:
    """
    Split text into alternating letter / non-letter chunks.

    Yields:
        (is_word, chunk) pairs; joining the chunks gives back text

    Examples:
        >>> list(iter_letter_runs("Hi, you!"))
        [(True, 'Hi'), (False, ', '), (True, 'you'), (False, '!')]
    """
    for match in _RUN_PATTERN.finditer(text):
        chunk = match.group(0)
        yield chunk[0].isascii() and chunk[0].isalpha(), chunk


def stem_text(text: str, stemmer: Optional[BaseStemmer] = None) -> str:
    """
    Stem every word in text, keeping everything between words as is.

    Words are lowercased before stemming; non-letters (digits, punctuation,
    whitespace, non-ASCII) are copied unchanged.

    Args:
        text: Arbitrary text
        stemmer: Backend to use (default: configured via STEMMER_TYPE)

    Returns:
        Text with every letter run replaced by its stem

    Examples:
        >>> stem_text("Ponies, running in 3 fields!")
        'poni, run in 3 field!'
    """
    if not text:
        return ""

    stemmer = stemmer or get_stemmer()
    parts = []
    words = 0
    for is_word, chunk in iter_letter_runs(text):
        if is_word:
            parts.append(stemmer.stem(chunk.lower()))
            words += 1
        else:
            parts.append(chunk)

    logger.debug(f"Stemmed {words} words ({len(text)} chars)")
    return "".join(parts)


def tokenize(
    text: str,
    stemmer: Optional[BaseStemmer] = None,
    remove_stopwords: bool = True,
) -> List[str]:
    """
    Tokenize text into stemmed terms.

    Process:
    1. Convert to lowercase
    2. Extract words (runs of ASCII letters; digits and punctuation split words)
    3. Remove stopwords (common English words like 'the', 'is', 'and')
    4. Apply stemming (reduce to root: "searching" → "search")

    Args:
        text: Input text to tokenize
        stemmer: Backend to use (default: configured via STEMMER_TYPE)
        remove_stopwords: Drop STOPWORDS before stemming

    Returns:
        List of lowercase stems

    Examples:
        >>> tokenize("The ponies are running!")
        ['poni', 'run']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    # Lowercase
    text = text.lower()

    tokens = re.findall(r'[a-z]+', text)

    if remove_stopwords:
        tokens = [t for t in tokens if t not in STOPWORDS]

    if not tokens:
        return []

    stemmer = stemmer or get_stemmer()
    return [stemmer.stem(t) for t in tokens]
