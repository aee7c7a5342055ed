"""Vocabulary trainer: spaced-repetition scheduling for a staged learning pipeline."""

__version__ = "0.1.0"
