"""
TF–IDF and document-similarity utilities.

This module operates on a term x document frequency matrix (terms as
rows, documents as columns), typically produced by
``lexikit.features.tokenize.get_term_frequencies_from_sentences``, and
provides:

- TF–IDF weighting with per-document L2 normalization
- cosine similarity between documents
- latent semantic analysis (LSA) similarity through a truncated SVD

Decomposition is delegated to numpy; column normalization uses
scikit-learn so that all-zero documents stay zero instead of turning
into NaNs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np
import pandas as pd
from sklearn.preprocessing import normalize


MatrixLike = Union[np.ndarray, pd.DataFrame]


def _as_float_matrix(matrix: MatrixLike) -> np.ndarray:
    arr = np.array(matrix, dtype=float)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2D term x document matrix, got shape {arr.shape}")
    return arr


def _document_similarity(document_vectors: np.ndarray) -> np.ndarray:
    """
    Pairwise cosine similarity between the columns of a matrix whose
    columns are already unit length (or zero).
    """
    similarity = document_vectors.T @ document_vectors
    np.fill_diagonal(similarity, 1.0)
    return similarity


@dataclass
class CosineSimilarityMatrix:
    """Document x document cosine similarities (diagonal is 1.0)."""

    cosine_similarity_matrix: np.ndarray


@dataclass
class LsaCosineSimilarityMatrix:
    """Document x document cosine similarities in a reduced LSA space."""

    lsa_cosine_similarity_matrix: np.ndarray


@dataclass
class TfidfMatrix:
    """TF–IDF weighted, column-normalized term x document matrix."""

    tfidf_matrix: np.ndarray

    def get_cosine_similarity_from_tfidf(self) -> CosineSimilarityMatrix:
        """
        Compute the cosine similarity between every pair of documents.

        The columns of ``tfidf_matrix`` are unit length, so
        ``cos(D_i, D_j)`` reduces to the dot product ``D_i . D_j``.

        Returns
        -------
        CosineSimilarityMatrix
            Symmetric n_docs x n_docs matrix with 1.0 on the diagonal.
        """
        return CosineSimilarityMatrix(_document_similarity(self.tfidf_matrix))

    def get_lsa_cosine_similarity_from_tfidf(self, k: int) -> LsaCosineSimilarityMatrix:
        """
        Compute document similarity after projecting onto the top ``k``
        singular dimensions.

        With ``tfidf = U S V^T``, each document is represented by its
        column of ``S_k V_k^T``; those vectors are normalized and
        compared by dot product.

        Parameters
        ----------
        k : int
            Number of singular values to keep.

        Returns
        -------
        LsaCosineSimilarityMatrix
            Symmetric n_docs x n_docs matrix with 1.0 on the diagonal.

        Raises
        ------
        ValueError
            If ``k`` is not in ``1..min(n_terms, n_docs)``.
        """
        max_rank = min(self.tfidf_matrix.shape)
        if not 1 <= k <= max_rank:
            raise ValueError(
                f"k must be between 1 and {max_rank} for a matrix of shape "
                f"{self.tfidf_matrix.shape}, got {k}"
            )

        _, singular_values, vt = np.linalg.svd(self.tfidf_matrix, full_matrices=False)
        reduced = np.diag(singular_values[:k]) @ vt[:k, :]
        reduced = normalize(reduced, norm="l2", axis=0)
        return LsaCosineSimilarityMatrix(_document_similarity(reduced))


class DocumentTermFrequencies:
    """
    Raw term frequencies for a collection of documents.

    Parameters
    ----------
    document_term_frequencies : MatrixLike
        Matrix with terms as rows and documents as columns. A DataFrame
        keeps its labels in ``terms`` / ``documents``.
    """

    def __init__(self, document_term_frequencies: MatrixLike) -> None:
        if isinstance(document_term_frequencies, pd.DataFrame):
            self.terms = list(document_term_frequencies.index)
            self.documents = list(document_term_frequencies.columns)
        else:
            self.terms = None
            self.documents = None
        self.document_term_frequencies = _as_float_matrix(document_term_frequencies)

    def get_tfidf(self) -> TfidfMatrix:
        """
        Weight frequencies by inverse document frequency and normalize.

        For term ``t_i`` in document ``D_j`` the weight is
        ``w_ij = tf_ij * ln(n / n_i)`` where ``n`` is the number of
        documents and ``n_i`` the number of documents containing the
        term. Every document column is then scaled to unit length so
        that document length does not dominate similarity.

        Returns
        -------
        TfidfMatrix
            Weighted and normalized matrix, same shape as the input.
        """
        tf = self.document_term_frequencies
        n_docs = tf.shape[1]
        doc_counts = np.count_nonzero(tf > 0, axis=1).astype(float)

        # Terms that occur nowhere have tf == 0 everywhere; give them idf 0.
        idf = np.where(
            doc_counts > 0, np.log(n_docs / np.maximum(doc_counts, 1.0)), 0.0
        )

        weighted = tf * idf[:, np.newaxis]
        return TfidfMatrix(normalize(weighted, norm="l2", axis=0))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            self.document_term_frequencies, index=self.terms, columns=self.documents
        )
