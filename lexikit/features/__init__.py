"""
Text processing and feature extraction utilities.

This subpackage includes:
- the suffix-stripping stemmer
- tokenization, stopword removal, and term-frequency tables
- TF–IDF weighting and document similarity (cosine and LSA).
"""
