"""
Data loading utilities.

This subpackage provides:
- sentiment lexicon loading from JSON and ratings CSVs
- small sample datasets used by the examples and tests.
"""
