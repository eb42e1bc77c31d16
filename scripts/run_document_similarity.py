"""
Compare a handful of documents by TF–IDF cosine and LSA similarity.

This script:

- builds a term x document frequency table from the given documents
- weights it with TF–IDF
- logs the cosine similarity matrix
- logs the LSA similarity matrix for the requested number of dimensions

Usage (from project root):

    python -m scripts.run_document_similarity
    # or, with your own documents
    python scripts/run_document_similarity.py --lsa-k 2 "Call me Ishmael" "O happy dagger"
"""

from __future__ import annotations

import argparse

import pandas as pd

from lexikit.features.document import DocumentTermFrequencies
from lexikit.features.tokenize import get_term_frequencies_from_sentences
from lexikit.utils.config_utils import DEFAULT_CONFIG_PATH, get_logger, load_config


DEFAULT_DOCUMENTS = [
    "It is a far, far better thing I do, than I have ever done",
    "Call me Ishmael",
    "Is this a dagger I see before me?",
    "O happy dagger",
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute TF–IDF cosine and LSA similarity between documents."
    )
    parser.add_argument(
        "documents",
        nargs="*",
        default=DEFAULT_DOCUMENTS,
        help="Documents to compare (default: four literary one-liners).",
    )
    parser.add_argument(
        "--lsa-k",
        type=int,
        default=2,
        help="Number of singular dimensions kept for LSA (default: 2).",
    )
    parser.add_argument(
        "--stemmed",
        action="store_true",
        help="Count stems instead of raw tokens.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to config YAML (default: {DEFAULT_CONFIG_PATH}).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    cfg = load_config(args.config)
    logger = get_logger(name="run_document_similarity", config=cfg, log_file_suffix="similarity")

    labels = [f"Document {i + 1}" for i in range(len(args.documents))]
    frequencies = get_term_frequencies_from_sentences(args.documents, stemmed=args.stemmed)
    logger.info("Vocabulary size: %d terms over %d documents.", *frequencies.shape)

    tfidf = DocumentTermFrequencies(frequencies).get_tfidf()

    cosine = tfidf.get_cosine_similarity_from_tfidf().cosine_similarity_matrix
    logger.info(
        "COSINE SIMILARITY MATRIX\n%s",
        pd.DataFrame(cosine, index=labels, columns=labels).round(2),
    )

    try:
        lsa = tfidf.get_lsa_cosine_similarity_from_tfidf(args.lsa_k).lsa_cosine_similarity_matrix
    except ValueError:
        logger.exception("Could not compute LSA similarity with k=%d.", args.lsa_k)
        raise

    logger.info(
        "LSA COSINE SIMILARITY MATRIX (k=%d)\n%s",
        args.lsa_k,
        pd.DataFrame(lsa, index=labels, columns=labels).round(2),
    )


if __name__ == "__main__":
    main()
