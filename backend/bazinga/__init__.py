"""Bazinga — vowel-run replacement service."""

__version__ = "1.0.0"
