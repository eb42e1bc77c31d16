"""
Tests for tokenization and term-frequency utilities.

These tests validate that:

- sentences and word tokens are split the way downstream code expects
- term frequencies are counted over raw and stemmed tokens
- non-ASCII tokens fall back to their raw text instead of failing
- the multi-document table lines up every document on one vocabulary
- the config-driven pipeline honours its switches
"""

from __future__ import annotations

import os

import yaml

from lexikit.features.stemmer import try_stem
from lexikit.features.tokenize import (
    get_stemmed_term_frequencies_from_sentence,
    get_stemmed_term_frequencies_from_word_vector,
    get_stopword_set,
    get_term_frequencies_from_sentence,
    get_term_frequencies_from_sentences,
    get_term_frequencies_from_word_vector,
    preprocess_text_to_tokens,
    remove_stopwords,
    stem_tokens,
    tokenize_into_sentences,
    tokenize_sentence,
)


FEAR_SENTENCE = (
    "fear leads to anger, anger leads to hatred, hatred leads to conflict, "
    "conflict leads to suffering."
)


def _write_config(tmp_path, preprocessing):
    path = os.path.join(str(tmp_path), "lexikit.yaml")
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump({"preprocessing": preprocessing}, f)
    return path


# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------


def test_tokenize_into_sentences():
    text = "Why hello there. General Kenobi!"
    assert tokenize_into_sentences(text) == ["Why hello there", "General Kenobi"]


def test_tokenize_into_sentences_keeps_quoted_terminators_inside():
    text = 'He said "stop." Then he left.'
    assert tokenize_into_sentences(text) == ['He said "stop" Then he left']


def test_tokenize_into_sentences_empty_document():
    assert tokenize_into_sentences("") == []
    assert tokenize_into_sentences("?!.") == []


def test_tokenize_sentence_strips_punctuation_and_keeps_case():
    text = "Why hello there. General Kenobi!"
    assert tokenize_sentence(text) == ["Why", "hello", "there", "General", "Kenobi"]


def test_tokenize_sentence_joins_words_split_by_punctuation():
    tokens = tokenize_sentence("It's a far-off, well-known place")
    assert tokens == ["Its", "a", "faroff", "wellknown", "place"]


def test_tokenize_sentence_handles_irregular_whitespace():
    assert tokenize_sentence("  two\tspaces  here \n") == ["two", "spaces", "here"]


# ---------------------------------------------------------------------------
# Stopwords
# ---------------------------------------------------------------------------


def test_remove_stopwords_is_case_insensitive():
    tokens = ["The", "cat", "is", "here"]
    assert remove_stopwords(tokens, get_stopword_set()) == ["cat"]


def test_remove_stopwords_with_empty_set_is_identity():
    assert remove_stopwords(["a", "b"], set()) == ["a", "b"]


# ---------------------------------------------------------------------------
# Term frequencies
# ---------------------------------------------------------------------------


def test_term_frequencies_from_word_vector():
    tokens = tokenize_sentence(FEAR_SENTENCE)
    expected = {
        "anger": 2.0,
        "conflict": 2.0,
        "fear": 1.0,
        "hatred": 2.0,
        "leads": 4.0,
        "suffering": 1.0,
        "to": 4.0,
    }
    frequencies = get_term_frequencies_from_word_vector(tokens)
    assert frequencies == expected
    assert list(frequencies) == sorted(expected)


def test_term_frequencies_from_sentence_matches_word_vector():
    assert get_term_frequencies_from_sentence(FEAR_SENTENCE) == (
        get_term_frequencies_from_word_vector(tokenize_sentence(FEAR_SENTENCE))
    )


def test_stemmed_term_frequencies_from_sentence():
    frequencies = get_stemmed_term_frequencies_from_sentence(FEAR_SENTENCE)
    assert frequencies == {
        "anger": 2.0,
        "conflict": 2.0,
        "fear": 1.0,
        "hatr": 2.0,
        "lead": 4.0,
        "suffer": 1.0,
        "to": 4.0,
    }


def test_stemmed_term_frequencies_fall_back_on_non_ascii_tokens():
    frequencies = get_stemmed_term_frequencies_from_word_vector(["naïve", "cats", "cats"])
    assert frequencies == {"cat": 2.0, "naïve": 1.0}


def test_stem_tokens_keeps_short_tokens_as_is():
    assert stem_tokens(["I", "betrayed", "the", "bees"]) == ["I", "betrai", "the", "bee"]


def test_term_frequencies_from_sentences_share_vocabulary():
    table = get_term_frequencies_from_sentences(["a b b", "b c"])
    assert list(table.index) == ["a", "b", "c"]
    assert list(table.columns) == [0, 1]
    assert table.loc["a"].tolist() == [1.0, 0.0]
    assert table.loc["b"].tolist() == [2.0, 1.0]
    assert table.loc["c"].tolist() == [0.0, 1.0]


def test_term_frequencies_from_sentences_stemmed():
    table = get_term_frequencies_from_sentences(["cats", "cat"], stemmed=True)
    assert list(table.index) == ["cat"]
    assert table.loc["cat"].tolist() == [1.0, 1.0]


def test_term_frequencies_from_sentences_with_empty_document():
    table = get_term_frequencies_from_sentences(["hello world", ""])
    assert table.shape == (2, 2)
    assert table[1].tolist() == [0.0, 0.0]


# ---------------------------------------------------------------------------
# Config-driven pipeline
# ---------------------------------------------------------------------------


def test_preprocess_text_to_tokens_full_pipeline(tmp_path):
    config_path = _write_config(
        tmp_path,
        {
            "lowercase": True,
            "stopwords": {"enabled": True},
            "stemming": {"enabled": True},
        },
    )
    tokens = preprocess_text_to_tokens("The cats were running. Dogs barked!", config_path)
    assert tokens == ["cat", "run", "dog", "bark"]


def test_preprocess_text_to_tokens_without_stemming(tmp_path):
    config_path = _write_config(
        tmp_path,
        {
            "lowercase": False,
            "stopwords": {"enabled": False},
            "stemming": {"enabled": False},
        },
    )
    tokens = preprocess_text_to_tokens("The cats were running.", config_path)
    assert tokens == ["The", "cats", "were", "running"]


def test_preprocess_text_to_tokens_empty_text(tmp_path):
    config_path = _write_config(tmp_path, {"stemming": {"enabled": True}})
    assert preprocess_text_to_tokens("", config_path) == []


def test_stem_tokens_matches_try_stem():
    tokens = ["Ponies", "naïve", "ok", "generalization"]
    assert stem_tokens(tokens) == [try_stem(t) for t in tokens]
