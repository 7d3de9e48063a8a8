"""Vocabulary drill backend: spaced-repetition queue, SM-2 scheduling and progress."""

__version__ = "0.1.0"
