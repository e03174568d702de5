"""
Porter Stemmer for English.

Classic Porter (1980) suffix-stripping algorithm, following the behaviour of
Martin Porter's reference implementation (including its departures from the
paper: "bli" -> "ble", "logi" -> "log", dropping "ism" etc).

The word lives in a small mutable buffer while five ordered steps strip or
rewrite its suffixes:
1. Plurals and -ed/-ing (step 1ab), then terminal y -> i (step 1c)
2. Double suffixes to single ones ("-ization" -> "-ize")
3. -ic-, -full, -ness etc.
4. -ant, -ence etc. (only for words with measure > 1)
5. Tidy up a final -e and a double -ll

Examples:
- "caresses" → "caress"
- "ponies" → "poni"
- "running" → "run"
- "capabilities" → "capabl"

Input outside ASCII letters is accepted but the output is meaningless
(garbage in, garbage out). No error is raised.
"""

from typing import List, Tuple

VOWELS = frozenset("aeiou")

# Step 2: dispatched on the penultimate letter, tried in order
STEP2_RULES = {
    "a": (("ational", "ate"), ("tional", "tion")),
    "c": (("enci", "ence"), ("anci", "ance")),
    "e": (("izer", "ize"),),
    "l": (("bli", "ble"), ("alli", "al"), ("entli", "ent"), ("eli", "e"), ("ousli", "ous")),
    "o": (("ization", "ize"), ("ation", "ate"), ("ator", "ate")),
    "s": (("alism", "al"), ("iveness", "ive"), ("fulness", "ful"), ("ousness", "ous")),
    "t": (("aliti", "al"), ("iviti", "ive"), ("biliti", "ble")),
    "g": (("logi", "log"),),
}

# Step 3: dispatched on the last letter
STEP3_RULES = {
    "e": (("icate", "ic"), ("ative", ""), ("alize", "al")),
    "i": (("iciti", "ic"),),
    "l": (("ical", "ic"), ("ful", "")),
    "s": (("ness", ""),),
}

# Step 4: dispatched on the penultimate letter, suffixes are removed outright
STEP4_SUFFIXES = {
    "a": ("al",),
    "c": ("ance", "ence"),
    "e": ("er",),
    "i": ("ic",),
    "l": ("able", "ible"),
    "n": ("ant", "ement", "ment", "ent"),
    "o": ("ion", "ou"),
    "s": ("ism",),
    "t": ("ate", "iti"),
    "u": ("ous",),
    "v": ("ive",),
    "z": ("ize",),
}


class WordBuffer:
    """
    Working state for stemming a single word.

    Holds the lower-cased characters plus the active region [start, end].
    The index just before a matched suffix (the "boundary") is never stored:
    ends_with() returns it and callers pass it explicitly to the primitives
    that need it.
    """

    def __init__(self, word: str):
        self.buffer: List[str] = list(word.lower())
        self.start = 0
        self.end = len(self.buffer) - 1

    @property
    def text(self) -> str:
        """Current word, i.e. the active region"""
        return "".join(self.buffer[self.start:self.end + 1])

    # -- classification -------------------------------------------------

    def is_consonant(self, i: int) -> bool:
        """
        True if buffer[i] is a consonant.

        'y' is a consonant at the start of the word or after a vowel, and a
        vowel after a consonant. A run of y's alternates, so walk left to the
        first non-y letter and use the parity of the distance.
        """
        flip = False
        while True:
            ch = self.buffer[i]
            if ch in VOWELS:
                return flip
            if ch != "y":
                return not flip
            if i == self.start:
                return not flip
            i -= 1
            flip = not flip

    def measure(self, boundary: int) -> int:
        """
        Count VC sequences in [start, boundary].

        With C a run of consonants and V a run of vowels, any word has the form
        [C](VC){m}[V] and m is the measure:

            tr, ee, tree, y, by        -> 0
            trouble, oats, trees, ivy  -> 1
            troubles, private, oaten   -> 2
        """
        n = 0
        i = self.start
        # optional leading consonants
        while i <= boundary and self.is_consonant(i):
            i += 1
        while i <= boundary:
            while i <= boundary and not self.is_consonant(i):
                i += 1
            if i > boundary:
                break
            n += 1
            while i <= boundary and self.is_consonant(i):
                i += 1
        return n

    def vowel_in_stem(self, boundary: int) -> bool:
        return any(not self.is_consonant(i) for i in range(self.start, boundary + 1))

    def double_consonant(self, i: int) -> bool:
        """True if i and i-1 hold the same consonant"""
        if i < self.start + 1:
            return False
        if self.buffer[i] != self.buffer[i - 1]:
            return False
        return self.is_consonant(i)

    def cvc(self, i: int) -> bool:
        """
        True if i-2, i-1, i is consonant-vowel-consonant and the last consonant
        is not w, x or y.

        Used to restore an e at the end of short words: cav(e), lov(e), hop(e),
        crim(e), but not snow, box, tray.
        """
        if i < self.start + 2:
            return False
        if not self.is_consonant(i) or self.is_consonant(i - 1) or not self.is_consonant(i - 2):
            return False
        return self.buffer[i] not in "wxy"

    # -- suffix match / replace -----------------------------------------

    def ends_with(self, suffix: str) -> Tuple[bool, int]:
        """
        Check whether the active region ends with suffix.

        Returns:
            (matched, boundary) where boundary is the index just before the
            suffix. On a failed match boundary is simply end and must not be
            used to rewrite the word.
        """
        length = len(suffix)
        if length > self.end - self.start + 1:
            return False, self.end
        if "".join(self.buffer[self.end - length + 1:self.end + 1]) != suffix:
            return False, self.end
        return True, self.end - length

    def set_to(self, boundary: int, replacement: str) -> None:
        """Overwrite the word after boundary with replacement"""
        for offset, ch in enumerate(replacement):
            self.buffer[boundary + 1 + offset] = ch
        self.end = boundary + len(replacement)

    def replace_if_measured(self, boundary: int, replacement: str) -> None:
        if self.measure(boundary) > 0:
            self.set_to(boundary, replacement)

    # -- steps ----------------------------------------------------------

    def step1ab(self) -> None:
        """
        Remove plurals and -ed or -ing.

            caresses  ->  caress      feed      ->  feed
            ponies    ->  poni        agreed    ->  agree
            ties      ->  ti          plastered ->  plaster
            caress    ->  caress      motoring  ->  motor
            cats      ->  cat         sing      ->  sing

            conflated ->  conflate    hopping   ->  hop
            troubled  ->  trouble     falling   ->  fall
            sized     ->  size        filing    ->  file
        """
        if self.buffer[self.end] == "s":
            matched, boundary = self.ends_with("ies")
            if self.ends_with("sses")[0]:
                self.end -= 2
            elif matched:
                self.set_to(boundary, "i")
            elif self.buffer[self.end - 1] != "s":
                self.end -= 1

        matched, boundary = self.ends_with("eed")
        if matched:
            if self.measure(boundary) > 0:
                self.end -= 1
            return

        matched, boundary = self.ends_with("ed")
        if not matched:
            matched, boundary = self.ends_with("ing")
        if not matched or not self.vowel_in_stem(boundary):
            return

        self.end = boundary
        for short, long in (("at", "ate"), ("bl", "ble"), ("iz", "ize")):
            matched, boundary = self.ends_with(short)
            if matched:
                self.set_to(boundary, long)
                return

        if self.double_consonant(self.end):
            if self.buffer[self.end] not in "lsz":
                self.end -= 1
        elif self.measure(self.end) == 1 and self.cvc(self.end):
            self.set_to(self.end, "e")

    def step1c(self) -> None:
        """Turn terminal y to i when there is another vowel in the stem"""
        matched, boundary = self.ends_with("y")
        if matched and self.vowel_in_stem(boundary):
            self.buffer[self.end] = "i"

    def step2(self) -> None:
        """Map double suffixes to single ones, e.g. -ization -> -ize"""
        if self.end <= self.start:
            return
        for suffix, replacement in STEP2_RULES.get(self.buffer[self.end - 1], ()):
            matched, boundary = self.ends_with(suffix)
            if matched:
                self.replace_if_measured(boundary, replacement)
                return

    def step3(self) -> None:
        """Deal with -ic-, -full, -ness etc. (same strategy as step 2)"""
        for suffix, replacement in STEP3_RULES.get(self.buffer[self.end], ()):
            matched, boundary = self.ends_with(suffix)
            if matched:
                self.replace_if_measured(boundary, replacement)
                return

    def step4(self) -> None:
        """Take off -ant, -ence etc. in context <c>vcvc<v>"""
        if self.end <= self.start:
            return
        for suffix in STEP4_SUFFIXES.get(self.buffer[self.end - 1], ()):
            matched, boundary = self.ends_with(suffix)
            if not matched:
                continue
            # -ion only goes after s or t
            if suffix == "ion" and not (boundary >= self.start and self.buffer[boundary] in "st"):
                continue
            if self.measure(boundary) > 1:
                self.end = boundary
            return

    def step5(self) -> None:
        """Remove a final -e if m > 1, and change -ll to -l if m > 1"""
        boundary = self.end
        if self.buffer[self.end] == "e":
            a = self.measure(boundary)
            if a > 1 or (a == 1 and not self.cvc(self.end - 1)):
                self.end -= 1
        if self.buffer[self.end] == "l" and self.double_consonant(self.end) and self.measure(boundary) > 1:
            self.end -= 1


class PorterStemmer:
    """
    Porter stemming algorithm.

    Each call works on its own WordBuffer, so one instance can be shared
    freely (including across threads).
    """

    def stem(self, word: str) -> str:
        """
        Stem a single word.

        Args:
            word: Word to stem (any case, ASCII letters expected)

        Returns:
            Lowercase stem, never longer than the input

        Examples:
            >>> PorterStemmer().stem("troubling")
            'troubl'
        """
        if not word:
            return ""

        w = WordBuffer(word)
        # strings of length 1 or 2 don't go through stemming
        if w.end <= w.start + 1:
            return w.text

        w.step1ab()
        if w.end > w.start:
            w.step1c()
            w.step2()
            w.step3()
            w.step4()
            w.step5()
        return w.text


# Stateless, safe to share
_stemmer = PorterStemmer()


def stem(word: str) -> str:
    """
    Stem a single word using the Porter algorithm.

    Args:
        word: Word to stem (lowercased on entry)

    Returns:
        Stemmed word

    Examples:
        >>> stem("caresses")
        'caress'
        >>> stem("running")
        'run'
        >>> stem("capabilities")
        'capabl'
    """
    return _stemmer.stem(word)
