"""
Models built on top of the text features.

Currently this is the valence/arousal sentiment model.
"""
