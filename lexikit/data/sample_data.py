"""
Small built-in datasets for examples and tests.

- a three-word sentiment lexicon (abduction, betrayed, bees)
- an 11 x 4 term x document frequency matrix
"""

from __future__ import annotations

import numpy as np

from lexikit.models.sentiment import Lexicon, SentimentEntry


def get_sample_custom_word_dict() -> Lexicon:
    return {
        "abduction": SentimentEntry(
            word="abduction", stem="abduct", avg=[2.76, 5.53], std=[2.06, 2.43]
        ),
        "betrayed": SentimentEntry(
            word="betrayed", stem="betrai", avg=[2.57, 7.24], std=[1.83, 2.06]
        ),
        "bees": SentimentEntry(
            word="bees", stem="bee", avg=[3.2, 6.51], std=[2.07, 2.14]
        ),
    }


def get_term_frequencies() -> np.ndarray:
    """Term x document frequencies: 11 terms (rows) over 4 documents (columns)."""
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 1.0],
            [1.0, 0.0, 0.0, 0.0],
            [1.0, 0.0, 0.0, 0.0],
            [2.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, 0.0],
            [1.0, 0.0, 0.0, 0.0],
        ]
    )
