"""Locale word tables (month and weekday names) and their cache.

Public API:
    LocaleWords - Immutable word table for one locale
    LocaleWordCache - Thread-safe, explicit cache of word tables
    load_babel_words - Default loader backed by Babel CLDR data
"""

from .words import LocaleWordCache, LocaleWords, WordLoader, load_babel_words

__all__ = [
    "LocaleWordCache",
    "LocaleWords",
    "WordLoader",
    "load_babel_words",
]
