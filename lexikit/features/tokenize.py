"""
Tokenization and term-frequency utilities.

This module splits raw text into sentences and word tokens and builds
the frequency tables consumed by the document and sentiment code:

- sentence splitting on terminal punctuation
- word tokenization with punctuation removal
- stopword removal
- term frequencies over raw or stemmed tokens
- a term x document frequency table for several documents

Stemming here is best-effort: a token the stemmer rejects (non-ASCII)
is counted under its raw text instead of aborting the whole document.
The config-driven pipeline reads the "preprocessing" section of
config/lexikit.yaml.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Dict, Iterable, List, Sequence, Set

import pandas as pd
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from lexikit.features.stemmer import try_stem
from lexikit.utils.config_utils import DEFAULT_CONFIG_PATH, get_config_section

_QUOTED_TERMINATOR_RE = re.compile(r'[.!?]"')
_SENTENCE_SEPARATOR_RE = re.compile(r"[.!?] *")
_PUNCTUATION_RE = re.compile(r"[!\"#$%&'()*+,\-./:;<=>?@\[\]^_`{|}~]+")


# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------


def tokenize_into_sentences(document: str) -> List[str]:
    """
    Split a document into sentences.

    A terminator directly followed by a closing quote does not end the
    sentence: ``He said "stop." Then left.`` yields the single sentence
    ``He said "stop" Then left``.

    Parameters
    ----------
    document : str
        Raw document text.

    Returns
    -------
    List[str]
        Non-empty sentences, without their terminators.
    """
    document = _QUOTED_TERMINATOR_RE.sub('"', document)
    return [s for s in _SENTENCE_SEPARATOR_RE.split(document) if s]


def tokenize_sentence(sentence: str) -> List[str]:
    """
    Split a sentence into word tokens, dropping ASCII punctuation.

    Case is preserved: ``"Why hello there."`` gives
    ``["Why", "hello", "there"]``. Tokens are split on any run of
    whitespace, so tabs and newlines separate words just as spaces do.
    """
    sentence = _PUNCTUATION_RE.sub("", sentence)
    return [t for t in (token.strip() for token in sentence.split()) if t]


# ---------------------------------------------------------------------------
# Stopwords
# ---------------------------------------------------------------------------


def get_stopword_set() -> Set[str]:
    """Return the English stopword set used by ``remove_stopwords``."""
    return set(ENGLISH_STOP_WORDS)


def remove_stopwords(tokens: Iterable[str], stopword_set: Set[str]) -> List[str]:
    """
    Remove stopwords from a list of tokens.

    The comparison is case-insensitive; surviving tokens keep their case.

    Parameters
    ----------
    tokens : Iterable[str]
        Input tokens.
    stopword_set : Set[str]
        Lowercase words to remove.

    Returns
    -------
    List[str]
        Tokens with stopwords removed.
    """
    if not stopword_set:
        return list(tokens)
    return [t for t in tokens if t.lower() not in stopword_set]


# ---------------------------------------------------------------------------
# Term frequencies
# ---------------------------------------------------------------------------


def stem_tokens(tokens: Iterable[str]) -> List[str]:
    """
    Stem every token, keeping tokens the stemmer rejects as they are.
    """
    return [try_stem(t) for t in tokens]


def get_term_frequencies_from_word_vector(
    word_tokens: Iterable[str],
) -> Dict[str, float]:
    """
    Count occurrences of each token.

    Parameters
    ----------
    word_tokens : Iterable[str]
        Tokens to count.

    Returns
    -------
    Dict[str, float]
        Mapping token -> count, ordered by token.
    """
    counts = Counter(word_tokens)
    return {term: float(counts[term]) for term in sorted(counts)}


def get_term_frequencies_from_sentence(sentence: str) -> Dict[str, float]:
    return get_term_frequencies_from_word_vector(tokenize_sentence(sentence))


def get_stemmed_term_frequencies_from_word_vector(
    word_tokens: Iterable[str],
) -> Dict[str, float]:
    """
    Count occurrences of each token's stem.

    Non-ASCII tokens are counted under their raw text.
    """
    return get_term_frequencies_from_word_vector(stem_tokens(word_tokens))


def get_stemmed_term_frequencies_from_sentence(sentence: str) -> Dict[str, float]:
    return get_stemmed_term_frequencies_from_word_vector(tokenize_sentence(sentence))


def get_term_frequencies_from_sentences(
    sentences: Sequence[str],
    stemmed: bool = False,
) -> pd.DataFrame:
    """
    Build a term x document frequency table for several documents.

    Every document is tokenized with ``tokenize_sentence``; the rows
    cover the union of all terms, so each column lines up with the
    others and can be fed straight into ``DocumentTermFrequencies``.

    Parameters
    ----------
    sentences : Sequence[str]
        One string per document.
    stemmed : bool
        Count stems instead of raw tokens.

    Returns
    -------
    pd.DataFrame
        Frequencies with terms as the (sorted) index and one column per
        document, in input order. Absent terms are 0.0.
    """
    count_fn = (
        get_stemmed_term_frequencies_from_sentence
        if stemmed
        else get_term_frequencies_from_sentence
    )
    columns = {index: count_fn(sentence) for index, sentence in enumerate(sentences)}
    table = pd.DataFrame(columns, columns=list(range(len(sentences))), dtype=float)
    return table.fillna(0.0).sort_index()


# ---------------------------------------------------------------------------
# High-level preprocessing
# ---------------------------------------------------------------------------


def preprocess_text_to_tokens(
    text: str,
    config_path: str = DEFAULT_CONFIG_PATH,
) -> List[str]:
    """
    Full preprocessing pipeline, returning tokens.

    The pipeline is controlled via the "preprocessing" section in
    config/lexikit.yaml:

    - lowercasing (if enabled)
    - tokenization with punctuation removal
    - stopword removal (if enabled)
    - best-effort stemming (if enabled)

    Parameters
    ----------
    text : str
        Raw input text.
    config_path : str
        Path to the YAML configuration.

    Returns
    -------
    List[str]
        Preprocessed tokens.
    """
    cfg = get_config_section("preprocessing", config_path)

    if not isinstance(text, str):
        text = str(text)
    if bool(cfg.get("lowercase", False)):
        text = text.lower()

    tokens = [
        token
        for sentence in tokenize_into_sentences(text)
        for token in tokenize_sentence(sentence)
    ]
    if not tokens:
        return []

    sw_cfg = cfg.get("stopwords", {}) or {}
    if bool(sw_cfg.get("enabled", False)):
        tokens = remove_stopwords(tokens, get_stopword_set())

    stem_cfg = cfg.get("stemming", {}) or {}
    if bool(stem_cfg.get("enabled", True)):
        tokens = stem_tokens(tokens)

    return tokens
