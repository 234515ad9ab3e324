#!/usr/bin/env python3
"""
Exceptions
==========
All PassKit errors derive from PassKitError. The concrete errors also
subclass ValueError, so callers that only care about bad input can keep
catching ValueError.
"""


class PassKitError(Exception):
    """Base class for PassKit errors."""


class InvalidBound(PassKitError, ValueError):
    """Random index requested for an empty or oversized range."""


class EmptyWordList(PassKitError, ValueError):
    """No words are available to build a passphrase from."""

    def __init__(self, message: str = None):
        super().__init__(
            message or "The word list is empty. Add words or reset to default."
        )


class InsufficientWords(PassKitError, ValueError):
    """Fewer words are available than the passphrase needs."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Not enough words ({available}) for a {required}-word passphrase. "
            f"Add more words or reduce the count."
        )


class ConfigError(PassKitError, ValueError):
    """A generation setting is out of range or malformed."""


class WordListError(PassKitError, ValueError):
    """A word list could not be found or contained no usable words."""


__all__ = [
    'PassKitError',
    'InvalidBound',
    'EmptyWordList',
    'InsufficientWords',
    'ConfigError',
    'WordListError',
]
