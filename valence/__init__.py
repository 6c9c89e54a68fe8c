"""Lexicon and rule based sentiment polarity scoring."""

__version__ = "0.4.0"
