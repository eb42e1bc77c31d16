"""
Top-level package for lexikit, a small natural-language preprocessing
toolkit.

This package contains modules for:
- Porter-style stemming of English words
- sentence/word tokenization and term-frequency tables
- TF–IDF, cosine similarity, and LSA document similarity
- valence/arousal sentiment analysis over a user-supplied lexicon
- lexicon loading and serialization
- shared configuration and logging helpers
"""
