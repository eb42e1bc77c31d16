"""
Porter-style suffix-stripping stemmer for English words.

The algorithm reduces a word to an approximate root by running five
ordered passes of suffix rules over a mutable byte buffer:

- step 1a/1b: plurals and -ed / -ing (with e-restoration and undoubling)
- step 1c:    terminal y -> i
- step 2:     double suffixes collapse to single ones (-ization -> -ize)
- step 3:     -ic-, -ful, -ness and friends
- step 4:     single-suffix removal in long stems (-ance, -ment, -ive)
- step 5:     final -e removal and -ll -> -l

Every rule is gated by the "measure" m of the stem region, i.e. the number
of vowel-consonant sequences in ``[0, boundary)``. Two rules follow the
reference C implementation rather than the published paper: step 2 maps
-bli to -ble (instead of -abli to -able) and -logi to -log.

Typical usage::

    >>> from lexikit.features.stemmer import stem
    >>> stem("pencils")
    'pencil'
    >>> stem("generalization")
    'gener'

Only ASCII input is accepted; anything else raises
``NonAsciiInputError`` before any processing happens. Words of two
characters or fewer are returned as-is, including their original case.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple

from lexikit.errors import NonAsciiInputError

logger = logging.getLogger(__name__)


_VOWELS = frozenset(b"aeiou")
_Y = ord("y")
_CVC_EXCLUDED = frozenset(b"wxy")
_UNDOUBLE_EXCLUDED = frozenset(b"lsz")

Rule = Tuple[bytes, bytes]

# Keyed on the penultimate letter of the word.
_STEP2_RULES: Dict[str, Sequence[Rule]] = {
    "a": ((b"ational", b"ate"), (b"tional", b"tion")),
    "c": ((b"enci", b"ence"), (b"anci", b"ance")),
    "e": ((b"izer", b"ize"),),
    "l": (
        (b"bli", b"ble"),
        (b"alli", b"al"),
        (b"entli", b"ent"),
        (b"eli", b"e"),
        (b"ousli", b"ous"),
    ),
    "o": ((b"ization", b"ize"), (b"ation", b"ate"), (b"ator", b"ate")),
    "s": (
        (b"alism", b"al"),
        (b"iveness", b"ive"),
        (b"fulness", b"ful"),
        (b"ousness", b"ous"),
    ),
    "t": ((b"aliti", b"al"), (b"iviti", b"ive"), (b"biliti", b"ble")),
    "g": ((b"logi", b"log"),),
}

# Keyed on the last letter of the word.
_STEP3_RULES: Dict[str, Sequence[Rule]] = {
    "e": ((b"icate", b"ic"), (b"ative", b""), (b"alize", b"al")),
    "i": ((b"iciti", b"ic"),),
    "l": ((b"ical", b"ic"), (b"ful", b"")),
    "s": ((b"ness", b""),),
}

# Keyed on the penultimate letter of the word.
_STEP4_SUFFIXES: Dict[str, Sequence[bytes]] = {
    "a": (b"al",),
    "c": (b"ance", b"ence"),
    "e": (b"er",),
    "i": (b"ic",),
    "l": (b"able", b"ible"),
    "n": (b"ant", b"ement", b"ment", b"ent"),
    "o": (b"ion", b"ou"),
    "s": (b"ism",),
    "t": (b"ate", b"iti"),
    "u": (b"ous",),
    "v": (b"ive",),
    "z": (b"ize",),
}


# ---------------------------------------------------------------------------
# Word buffer
# ---------------------------------------------------------------------------


class WordBuffer:
    """
    Lowercased ASCII bytes of a single word under transformation.

    ``length`` is the logical end of the word; bytes past it are stale
    and never read. Suffix tests return a candidate boundary instead of
    storing it, and callers commit a rewrite explicitly with ``set_to``.

    Parameters
    ----------
    word : str
        Word to load. Must be pure ASCII.

    Raises
    ------
    NonAsciiInputError
        If ``word`` contains a non-ASCII character.
    """

    __slots__ = ("data", "length")

    def __init__(self, word: str) -> None:
        if not word.isascii():
            raise NonAsciiInputError(word)
        self.data = bytearray(word.lower(), "ascii")
        self.length = len(self.data)

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.data[: self.length].decode("ascii")

    def __repr__(self) -> str:
        return f"WordBuffer({str(self)!r})"

    def char_at(self, index: int) -> str:
        return chr(self.data[index])

    def ends(self, suffix: bytes) -> Optional[int]:
        """
        Test whether the word ends with ``suffix``.

        Returns
        -------
        Optional[int]
            The boundary ``length - len(suffix)`` on a match, else None.
            Nothing in the buffer is modified.
        """
        boundary = self.length - len(suffix)
        if boundary < 0:
            return None
        if self.data[boundary : self.length] != suffix:
            return None
        return boundary

    def set_to(self, boundary: int, replacement: bytes) -> None:
        """Overwrite ``[boundary, length)`` with ``replacement``."""
        end = boundary + len(replacement)
        self.data[boundary:end] = replacement
        self.length = end

    def replace_if_measured(self, boundary: int, replacement: bytes) -> None:
        """Apply ``set_to`` only when the stem before ``boundary`` has m > 0."""
        if measure(self, boundary) > 0:
            self.set_to(boundary, replacement)

    def truncate(self, length: int) -> None:
        self.length = length


# ---------------------------------------------------------------------------
# Classifier, measure and predicates
# ---------------------------------------------------------------------------


def is_consonant(buffer: WordBuffer, index: int) -> bool:
    """
    True if the letter at ``index`` acts as a consonant.

    ``a e i o u`` are vowels. ``y`` is a consonant at the start of a word
    and otherwise the opposite of the letter before it, so a run of y's
    alternates from the nearest non-y letter.
    """
    data = buffer.data
    flips = 0
    while index > 0 and data[index] == _Y:
        index -= 1
        flips += 1
    if data[index] == _Y:
        consonant = True
    else:
        consonant = data[index] not in _VOWELS
    return consonant if flips % 2 == 0 else not consonant


def measure(buffer: WordBuffer, boundary: int) -> int:
    """
    Count vowel-consonant sequences in ``[0, boundary)``.

    With C a consonant run and V a vowel run, any word has the form
    ``[C](VC){m}[V]`` and this returns m::

        tr, ee, tree, y, by          -> 0
        trouble, oats, trees, ivy    -> 1
        troubles, private, oaten     -> 2
    """
    index = 0
    while index < boundary and is_consonant(buffer, index):
        index += 1

    m = 0
    while index < boundary:
        while index < boundary and not is_consonant(buffer, index):
            index += 1
        if index >= boundary:
            break
        m += 1
        while index < boundary and is_consonant(buffer, index):
            index += 1
    return m


def has_vowel(buffer: WordBuffer, boundary: int) -> bool:
    return any(not is_consonant(buffer, index) for index in range(boundary))


def double_consonant(buffer: WordBuffer, index: int) -> bool:
    """True if ``index - 1`` and ``index`` hold the same consonant."""
    if index < 1 or buffer.data[index] != buffer.data[index - 1]:
        return False
    return is_consonant(buffer, index)


def cvc(buffer: WordBuffer, index: int) -> bool:
    """
    True if ``index - 2, index - 1, index`` is consonant-vowel-consonant
    and the last consonant is not w, x or y.

    Used to restore an e on short stems: cav(e), lov(e), hop(e), crim(e),
    but not snow, box, tray.
    """
    if index < 2:
        return False
    if (
        not is_consonant(buffer, index)
        or is_consonant(buffer, index - 1)
        or not is_consonant(buffer, index - 2)
    ):
        return False
    return buffer.data[index] not in _CVC_EXCLUDED


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


def step1ab(buffer: WordBuffer) -> None:
    """
    Remove plurals and -ed / -ing::

        caresses -> caress     feed     -> feed
        ponies   -> poni       agreed   -> agree
        ties     -> ti         disabled -> disable
        cats     -> cat        matting  -> mat
        mating   -> mate       milling  -> mill
        meeting  -> meet       messing  -> mess
    """
    if buffer.char_at(buffer.length - 1) == "s":
        if buffer.ends(b"sses") is not None:
            buffer.truncate(buffer.length - 2)
        elif buffer.ends(b"ies") is not None:
            buffer.set_to(buffer.length - 3, b"i")
        elif buffer.char_at(buffer.length - 2) != "s":
            buffer.truncate(buffer.length - 1)

    boundary = buffer.ends(b"eed")
    if boundary is not None:
        if measure(buffer, boundary) > 0:
            buffer.truncate(buffer.length - 1)
        return

    boundary = buffer.ends(b"ed")
    if boundary is None:
        boundary = buffer.ends(b"ing")
    if boundary is None or not has_vowel(buffer, boundary):
        return

    buffer.truncate(boundary)
    for suffix, replacement in ((b"at", b"ate"), (b"bl", b"ble"), (b"iz", b"ize")):
        restore_at = buffer.ends(suffix)
        if restore_at is not None:
            buffer.set_to(restore_at, replacement)
            return

    end = buffer.length - 1
    if double_consonant(buffer, end):
        if buffer.data[end] not in _UNDOUBLE_EXCLUDED:
            buffer.truncate(end)
    elif measure(buffer, buffer.length) == 1 and cvc(buffer, end):
        buffer.set_to(buffer.length, b"e")


def step1c(buffer: WordBuffer) -> None:
    """Turn a terminal y into i when the rest of the word has a vowel."""
    boundary = buffer.ends(b"y")
    if boundary is not None and has_vowel(buffer, boundary):
        buffer.data[boundary] = ord("i")


def _apply_first_rule(buffer: WordBuffer, rules: Sequence[Rule]) -> None:
    # Only the first matching suffix is considered, even if m blocks it.
    for suffix, replacement in rules:
        boundary = buffer.ends(suffix)
        if boundary is not None:
            buffer.replace_if_measured(boundary, replacement)
            return


def step2(buffer: WordBuffer) -> None:
    """Map double suffixes to single ones, e.g. -ization -> -ize."""
    if buffer.length < 2:
        return
    rules = _STEP2_RULES.get(buffer.char_at(buffer.length - 2))
    if rules:
        _apply_first_rule(buffer, rules)


def step3(buffer: WordBuffer) -> None:
    """Handle -ic-, -full, -ness etc. in the same way as step 2."""
    rules = _STEP3_RULES.get(buffer.char_at(buffer.length - 1))
    if rules:
        _apply_first_rule(buffer, rules)


def step4(buffer: WordBuffer) -> None:
    """Strip -ant, -ence etc. when the remaining stem has m > 1."""
    if buffer.length < 2:
        return
    suffixes = _STEP4_SUFFIXES.get(buffer.char_at(buffer.length - 2))
    if not suffixes:
        return

    for suffix in suffixes:
        boundary = buffer.ends(suffix)
        if boundary is None:
            continue
        # -ion only counts after s or t.
        if suffix == b"ion" and (
            boundary == 0 or buffer.char_at(boundary - 1) not in "st"
        ):
            return
        if measure(buffer, boundary) > 1:
            buffer.truncate(boundary)
        return


def step5(buffer: WordBuffer) -> None:
    """Remove a final -e if m > 1 (or m == 1 outside cvc), and -ll -> -l if m > 1."""
    if buffer.char_at(buffer.length - 1) == "e":
        m = measure(buffer, buffer.length)
        if m > 1 or (m == 1 and not cvc(buffer, buffer.length - 2)):
            buffer.truncate(buffer.length - 1)

    end = buffer.length - 1
    if (
        buffer.char_at(end) == "l"
        and double_consonant(buffer, end)
        and measure(buffer, buffer.length) > 1
    ):
        buffer.truncate(end)


_STEPS = (step1ab, step1c, step2, step3, step4, step5)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def stem(word: str) -> str:
    """
    Stem a single English word.

    Parameters
    ----------
    word : str
        Word token. Must contain only ASCII characters.

    Returns
    -------
    str
        Lowercase stem when ``len(word) > 2``; otherwise ``word``
        unchanged, original casing included.

    Raises
    ------
    NonAsciiInputError
        If ``word`` contains any non-ASCII character, whatever its length.
    """
    if not word.isascii():
        raise NonAsciiInputError(word)
    if len(word) <= 2:
        return word

    buffer = WordBuffer(word)
    for step in _STEPS:
        step(buffer)
    return str(buffer)


def try_stem(word: str) -> str:
    """
    Best-effort variant of ``stem`` that returns ``word`` itself when it
    cannot be stemmed.
    """
    try:
        return stem(word)
    except NonAsciiInputError:
        logger.debug("Keeping non-ASCII word unstemmed: %r", word)
        return word
