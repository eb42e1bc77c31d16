"""
Tests for the Porter-style stemmer.

These tests validate that:

- the consonant classifier, measure and cvc/double-consonant predicates
  follow the classic definitions, including the context-sensitive y
- suffix matching returns a boundary without touching the buffer
- each step applies its rules in order and respects the m gates
- the public stem() function rejects non-ASCII input, bypasses short
  words, lowercases everything else, and reproduces known stems
"""

from __future__ import annotations

import logging

import pytest

from lexikit.errors import NonAsciiInputError, StemError
from lexikit.features.stemmer import (
    WordBuffer,
    cvc,
    double_consonant,
    has_vowel,
    is_consonant,
    measure,
    stem,
    step1ab,
    step1c,
    step2,
    step3,
    step4,
    step5,
    try_stem,
)


# ---------------------------------------------------------------------------
# Classifier and predicates
# ---------------------------------------------------------------------------


def _classes(word: str) -> str:
    buf = WordBuffer(word)
    return "".join("c" if is_consonant(buf, i) else "v" for i in range(len(buf)))


@pytest.mark.parametrize(
    "word, expected",
    [
        ("tree", "ccvv"),
        ("toy", "cvc"),
        ("syzygy", "cvcvcv"),
        ("yyy", "cvc"),
        ("yes", "cvc"),
        ("ayy", "vcv"),
    ],
)
def test_is_consonant_handles_y_by_context(word, expected):
    assert _classes(word) == expected


@pytest.mark.parametrize(
    "word, m",
    [
        ("tr", 0), ("ee", 0), ("tree", 0), ("y", 0), ("by", 0),
        ("trouble", 1), ("oats", 1), ("trees", 1), ("ivy", 1),
        ("troubles", 2), ("private", 2), ("oaten", 2), ("orrery", 2),
    ],
)
def test_measure_counts_vc_sequences(word, m):
    buf = WordBuffer(word)
    assert measure(buf, len(buf)) == m


def test_measure_only_looks_before_boundary():
    buf = WordBuffer("generalization")
    assert measure(buf, len(buf)) == 6
    assert measure(buf, 7) == 3  # "general"
    assert measure(buf, 0) == 0


def test_has_vowel():
    buf = WordBuffer("sky")
    assert not has_vowel(buf, 2)
    assert has_vowel(buf, 3)
    assert not has_vowel(buf, 0)


def test_double_consonant():
    assert double_consonant(WordBuffer("fizz"), 3)
    assert not double_consonant(WordBuffer("tree"), 3)
    assert not double_consonant(WordBuffer("hop"), 0)


@pytest.mark.parametrize(
    "word, expected",
    [("hop", True), ("cave", False), ("cav", True), ("snow", False), ("box", False), ("tray", False)],
)
def test_cvc_at_end_of_word(word, expected):
    buf = WordBuffer(word)
    assert cvc(buf, len(buf) - 1) is expected


def test_cvc_needs_three_letters():
    assert not cvc(WordBuffer("op"), 1)


# ---------------------------------------------------------------------------
# Word buffer
# ---------------------------------------------------------------------------


def test_buffer_lowercases_and_rejects_non_ascii():
    assert str(WordBuffer("MeEtInGs")) == "meetings"
    with pytest.raises(NonAsciiInputError):
        WordBuffer("café")


def test_ends_returns_boundary_without_mutating():
    buf = WordBuffer("ponies")
    assert buf.ends(b"ies") == 3
    assert buf.ends(b"xyz") is None
    assert buf.ends(b"longerthanword") is None
    assert str(buf) == "ponies"
    assert len(buf) == 6


def test_set_to_can_grow_and_shrink_the_word():
    buf = WordBuffer("mat")
    buf.set_to(3, b"e")
    assert str(buf) == "mate"

    buf = WordBuffer("ponies")
    buf.set_to(3, b"i")
    assert str(buf) == "poni"
    assert len(buf) == 4


def test_replace_if_measured_is_gated_on_stem_measure():
    buf = WordBuffer("relational")
    buf.replace_if_measured(buf.ends(b"ational"), b"ate")
    assert str(buf) == "relate"

    buf = WordBuffer("rational")
    buf.replace_if_measured(buf.ends(b"ational"), b"ate")
    assert str(buf) == "rational"


# ---------------------------------------------------------------------------
# Individual steps
# ---------------------------------------------------------------------------


def _run(step, word: str) -> str:
    buf = WordBuffer(word)
    step(buf)
    return str(buf)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("caresses", "caress"),
        ("ponies", "poni"),
        ("ties", "ti"),
        ("caress", "caress"),
        ("cats", "cat"),
        ("feed", "feed"),
        ("agreed", "agree"),
        ("disabled", "disable"),
        ("matting", "mat"),
        ("mating", "mate"),
        ("meeting", "meet"),
        ("milling", "mill"),
        ("messing", "mess"),
        ("meetings", "meet"),
        ("sized", "size"),
        ("hoping", "hope"),
        ("fizzed", "fizz"),
        ("sing", "sing"),
    ],
)
def test_step1ab_plurals_and_ed_ing(word, expected):
    assert _run(step1ab, word) == expected


def test_step1c_only_with_vowel_in_stem():
    assert _run(step1c, "happy") == "happi"
    assert _run(step1c, "sky") == "sky"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("relational", "relate"),
        ("conditional", "condition"),
        ("rational", "rational"),
        ("valenci", "valence"),
        ("digitizer", "digitize"),
        ("conformabli", "conformable"),
        ("radicalli", "radical"),
        ("differentli", "different"),
        ("vileli", "vile"),
        ("analogousli", "analogous"),
        ("vietnamization", "vietnamize"),
        ("predication", "predicate"),
        ("operator", "operate"),
        ("feudalism", "feudal"),
        ("decisiveness", "decisive"),
        ("hopefulness", "hopeful"),
        ("callousness", "callous"),
        ("formaliti", "formal"),
        ("sensitiviti", "sensitive"),
        ("sensibiliti", "sensible"),
        ("archaeologi", "archaeolog"),
    ],
)
def test_step2_collapses_double_suffixes(word, expected):
    assert _run(step2, word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("triplicate", "triplic"),
        ("formative", "form"),
        ("formalize", "formal"),
        ("electriciti", "electric"),
        ("electrical", "electric"),
        ("hopeful", "hope"),
        ("goodness", "good"),
    ],
)
def test_step3_strips_adjective_suffixes(word, expected):
    assert _run(step3, word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("revival", "reviv"),
        ("allowance", "allow"),
        ("inference", "infer"),
        ("airliner", "airlin"),
        ("gyroscopic", "gyroscop"),
        ("adjustable", "adjust"),
        ("defensible", "defens"),
        ("irritant", "irrit"),
        ("replacement", "replac"),
        ("adjustment", "adjust"),
        ("dependent", "depend"),
        ("adoption", "adopt"),
        ("homologou", "homolog"),
        ("communism", "commun"),
        ("activate", "activ"),
        ("angulariti", "angular"),
        ("homologous", "homolog"),
        ("effective", "effect"),
        ("bowdlerize", "bowdler"),
    ],
)
def test_step4_removes_suffix_from_long_stems(word, expected):
    assert _run(step4, word) == expected


def test_step4_ion_needs_s_or_t_before_it():
    assert _run(step4, "communion") == "communion"


def test_step4_keeps_suffix_when_stem_is_short():
    assert _run(step4, "mate") == "mate"
    assert _run(step4, "relate") == "relate"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("probate", "probat"),
        ("rate", "rate"),
        ("cease", "ceas"),
        ("hope", "hope"),
        ("controll", "control"),
        ("roll", "roll"),
    ],
)
def test_step5_final_e_and_double_l(word, expected):
    assert _run(step5, word) == expected


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "word, expected",
    [
        ("pencils", "pencil"),
        ("caresses", "caress"),
        ("ponies", "poni"),
        ("ties", "ti"),
        ("cats", "cat"),
        ("feed", "feed"),
        ("matting", "mat"),
        ("mating", "mate"),
        ("meeting", "meet"),
        ("milling", "mill"),
        ("messing", "mess"),
        ("meetings", "meet"),
        ("agreed", "agre"),
        ("disabled", "disabl"),
        ("relational", "relat"),
        ("conditional", "condit"),
        ("generalization", "gener"),
        ("hopefulness", "hope"),
        ("electricity", "electr"),
        ("sensibility", "sensibl"),
        ("happy", "happi"),
        ("sky", "sky"),
        ("controlling", "control"),
        ("filing", "file"),
        ("hopping", "hop"),
        ("hoping", "hope"),
        ("falling", "fall"),
        ("triplicate", "triplic"),
        ("goodness", "good"),
        ("adoption", "adopt"),
        ("betrayed", "betrai"),
        ("bees", "bee"),
        ("the", "the"),
    ],
)
def test_stem_known_words(word, expected):
    assert stem(word) == expected


@pytest.mark.parametrize("word", ["", "a", "I", "Hi", "OK", "is"])
def test_short_words_are_returned_unchanged(word):
    assert stem(word) == word


def test_longer_words_are_lowercased():
    assert stem("CATS") == "cat"
    assert stem("Meetings") == "meet"
    assert stem("THE") == "the"


@pytest.mark.parametrize("word", ["hopè", "naïve", "é", "日本", "cafés", "x\u200b"])
def test_non_ascii_input_is_rejected_at_any_length(word):
    with pytest.raises(NonAsciiInputError) as excinfo:
        stem(word)
    assert excinfo.value.word == word
    assert isinstance(excinfo.value, StemError)
    assert isinstance(excinfo.value, ValueError)


def test_try_stem_falls_back_to_raw_word():
    assert try_stem("naïve") == "naïve"
    assert try_stem("ponies") == "poni"


def test_try_stem_logs_the_words_it_keeps(caplog):
    with caplog.at_level(logging.DEBUG, logger="lexikit.features.stemmer"):
        try_stem("naïve")
    assert "naïve" in caplog.text


def test_words_that_shrink_to_one_letter_survive_all_steps():
    assert stem("ies") == "i"
    assert stem("sss") == "sss"


@pytest.mark.parametrize(
    "word",
    [
        "pencils", "caresses", "ponies", "ties", "cats", "feed", "disabled",
        "matting", "mating", "meeting", "milling", "messing", "meetings",
    ],
)
def test_literal_cases_are_idempotent(word):
    once = stem(word)
    assert stem(once) == once


def test_idempotence_is_not_universal():
    assert stem("agreed") == "agre"
    assert stem("agre") == "agr"
