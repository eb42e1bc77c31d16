"""
Valence/arousal sentiment model over a user-supplied lexicon.

Each lexicon entry carries the mean and standard deviation of a word's
valence and arousal ratings (on the 1-9 scale used by ANEW-style
lexicons). The model answers three kinds of question:

- raw ratings for a single term
- a probability-weighted rating for a bag of terms, where terms with
  tighter ratings (smaller std) weigh more
- a Russell-circumplex description ("stressed", "very calm") for a
  valence/arousal point

Terms are looked up by their literal word first and by stem second, so
"betraying" finds an entry stored for "betrayed" through the shared stem
"betrai". Adding terms requires a valid stem: non-ASCII terms are
rejected with ``NonAsciiInputError`` and leave the lexicon unchanged.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional

from lexikit.errors import NonAsciiInputError, SentimentTermExistsError
from lexikit.features.stemmer import stem

logger = logging.getLogger(__name__)

VALENCE = 0
AROUSAL = 1

_MIN_RATING = 1.0
_MAX_RATING = 9.0

# Angular slices of the circumplex, shared by the top and bottom halves.
_ANGULAR_CUTOFFS = (0.0, 18.43, 45.0, 71.57, 90.0, 108.43, 135.0, 161.57, 180.0)
_LOWER_TERMS = (
    "contented", "serene", "relaxed", "calm",
    "bored", "lethargic", "depressed", "sad",
)
_UPPER_TERMS = (
    "happy", "elated", "excited", "alert",
    "tense", "nervous", "stressed", "upset",
)


@dataclass
class SentimentEntry:
    """
    A single lexicon entry.

    ``avg`` and ``std`` are ``[valence, arousal]`` pairs. ``source``
    names the lexicon the entry came from ("anew", "anew-ex",
    "happiness" or "custom").
    """

    word: str
    stem: str
    avg: List[float]
    std: List[float]
    source: str = "custom"
    fq: int = 0


Lexicon = Dict[str, SentimentEntry]


class SentimentModel:
    """
    Sentiment lookups over a word-keyed lexicon.

    Parameters
    ----------
    custom_words : Lexicon
        Mapping word -> entry. Both the mapping and its entries are
        copied, so updates made through the model never reach the caller.
        A stem index is derived from the entries' ``stem`` fields; when
        several words share a stem, the first one wins.
    """

    def __init__(self, custom_words: Lexicon) -> None:
        self.custom_words: Lexicon = dict(custom_words)
        self.custom_stems: Lexicon = {}
        for word, entry in list(self.custom_words.items()):
            entry = replace(entry, avg=list(entry.avg), std=list(entry.std))
            self.custom_words[word] = entry
            self.custom_stems.setdefault(entry.stem, entry)

    # -----------------------------------------------------------------------
    # Lookup
    # -----------------------------------------------------------------------

    def _lookup(self, term: str) -> Optional[SentimentEntry]:
        entry = self.custom_words.get(term)
        if entry is None:
            entry = self.custom_stems.get(term)
        if entry is None:
            try:
                stemmed = stem(term)
            except NonAsciiInputError:
                return None
            entry = self.custom_stems.get(stemmed)
        return entry

    def does_term_exist(self, term: str) -> bool:
        return self._lookup(term) is not None

    def _get_raw(self, term: str, axis: int) -> List[float]:
        entry = self._lookup(term)
        if entry is None:
            return [0.0, 0.0]
        return [entry.avg[axis], entry.std[axis]]

    def get_raw_valence(self, term: str) -> List[float]:
        """Return ``[mean, std]`` valence for ``term``, ``[0.0, 0.0]`` if unknown."""
        return self._get_raw(term, VALENCE)

    def get_raw_arousal(self, term: str) -> List[float]:
        """Return ``[mean, std]`` arousal for ``term``, ``[0.0, 0.0]`` if unknown."""
        return self._get_raw(term, AROUSAL)

    def get_valence_for_single_term(self, term: str) -> float:
        return self.get_raw_valence(term)[0]

    def get_arousal_for_single_term(self, term: str) -> float:
        return self.get_raw_arousal(term)[0]

    # -----------------------------------------------------------------------
    # Bags of terms
    # -----------------------------------------------------------------------

    def _weighted_mean(self, terms: Iterable[str], axis: int) -> float:
        """
        Average the ratings of the known terms, each weighted by the
        Gaussian density at its mean, ``p = 1 / sqrt(2 * pi * std^2)``.

        Terms with a zero standard deviation have no finite weight and
        are skipped.
        """
        weights: List[float] = []
        means: List[float] = []
        for term in terms:
            entry = self._lookup(term)
            if entry is None:
                continue
            std = entry.std[axis]
            if std <= 0.0:
                logger.debug("Skipping %r: non-positive std %s", term, std)
                continue
            weights.append(1.0 / math.sqrt(2.0 * math.pi * std ** 2))
            means.append(entry.avg[axis])

        total = sum(weights)
        if total == 0.0:
            return 0.0
        return sum(w / total * m for w, m in zip(weights, means))

    def get_valence_for_term_vector(self, terms: Iterable[str]) -> float:
        return self._weighted_mean(list(terms), VALENCE)

    def get_arousal_for_term_vector(self, terms: Iterable[str]) -> float:
        return self._weighted_mean(list(terms), AROUSAL)

    def get_sentiment_for_term(self, term: str) -> Dict[str, float]:
        return {
            "valence": self.get_valence_for_single_term(term),
            "arousal": self.get_arousal_for_single_term(term),
        }

    def get_sentiment_for_term_vector(self, terms: Iterable[str]) -> Dict[str, float]:
        terms = list(terms)
        return {
            "valence": self.get_valence_for_term_vector(terms),
            "arousal": self.get_arousal_for_term_vector(terms),
        }

    # -----------------------------------------------------------------------
    # Descriptions
    # -----------------------------------------------------------------------

    @staticmethod
    def get_sentiment_description(valence: float, arousal: float) -> str:
        """
        Map a valence/arousal point to a Russell-circumplex description.

        Both scores are centred on 5 and scaled to [-1, 1]. The polar
        angle picks one of eight slices (upper half when arousal is
        above 5) and the normalized radius picks an intensity prefix:
        "slightly ", "moderately ", none, or "very ".

        Parameters
        ----------
        valence : float
            Valence score in [1, 9].
        arousal : float
            Arousal score in [1, 9].

        Returns
        -------
        str
            Description such as "stressed" or "very calm"; "average" at
            the centre (5, 5) and "unknown" for out-of-range input.
        """
        if not (_MIN_RATING <= valence <= _MAX_RATING) or not (
            _MIN_RATING <= arousal <= _MAX_RATING
        ):
            logger.warning(
                "Valence and arousal must be bound between 1 and 9 (inclusive), "
                "got valence=%s, arousal=%s",
                valence,
                arousal,
            )
            return "unknown"

        # The centre has radius 0 and no angle.
        if valence == 5.0 and arousal == 5.0:
            return "average"

        norm_valence = (valence - 5.0) / 4.0
        norm_arousal = (arousal - 5.0) / 4.0
        radius = math.sqrt(norm_valence ** 2 + norm_arousal ** 2)
        cosine = max(-1.0, min(1.0, norm_valence / radius))
        direction = math.degrees(math.acos(cosine))

        # Scale radius so the corners of the square map to 1.
        if direction <= 45.0 or direction >= 135.0:
            radius /= math.sqrt(norm_arousal ** 2 + 1.0)
        else:
            radius /= math.sqrt(norm_valence ** 2 + 1.0)

        if radius <= 0.25:
            modifier = "slightly "
        elif radius <= 0.5:
            modifier = "moderately "
        elif radius > 0.75:
            modifier = "very "
        else:
            modifier = ""

        terms = _UPPER_TERMS if norm_arousal > 0.0 else _LOWER_TERMS
        for index, term in enumerate(terms):
            if _ANGULAR_CUTOFFS[index] <= direction <= _ANGULAR_CUTOFFS[index + 1]:
                return f"{modifier}{term}"

        logger.warning("Unexpected angle %s did not match any term", direction)
        return "unknown"

    def get_term_description(self, term: str) -> str:
        sentiment = self.get_sentiment_for_term(term)
        if sentiment["arousal"] == 0.0:
            return "unknown"
        return self.get_sentiment_description(sentiment["valence"], sentiment["arousal"])

    def get_term_vector_description(self, terms: Iterable[str]) -> str:
        sentiment = self.get_sentiment_for_term_vector(terms)
        if sentiment["arousal"] == 0.0:
            return "unknown"
        return self.get_sentiment_description(sentiment["valence"], sentiment["arousal"])

    # -----------------------------------------------------------------------
    # Lexicon updates
    # -----------------------------------------------------------------------

    def _insert_term(self, term: str, valence: float, arousal: float) -> None:
        # Stem first so a rejected term leaves both indexes untouched.
        stemmed = stem(term)
        self.custom_words[term] = SentimentEntry(
            word=term, stem=stemmed, avg=[valence, arousal], std=[1.0, 1.0], fq=1
        )
        self.custom_stems.setdefault(
            stemmed,
            SentimentEntry(
                word=stemmed, stem=stemmed, avg=[valence, arousal], std=[1.0, 1.0], fq=1
            ),
        )

    def add_term_without_replacement(self, term: str, valence: float, arousal: float) -> None:
        """
        Add a new term to the lexicon.

        Raises
        ------
        SentimentTermExistsError
            If ``term`` (or its stem) is already known.
        NonAsciiInputError
            If ``term`` cannot be stemmed.
        """
        if self.does_term_exist(term):
            raise SentimentTermExistsError(term)
        self._insert_term(term, valence, arousal)

    def add_term_with_replacement(self, term: str, valence: float, arousal: float) -> None:
        """
        Set the mean ratings of ``term``, adding it if it is unknown.

        Raises
        ------
        NonAsciiInputError
            If ``term`` is new and cannot be stemmed.
        """
        entry = self._lookup(term)
        if entry is not None:
            entry.avg = [valence, arousal]
            return
        self._insert_term(term, valence, arousal)
