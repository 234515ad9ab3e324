#!/usr/bin/env python3
"""
Phonetic Garbling
=================
Derives "garbled" variants of a word: copies with exactly one letter
swapped for a phonetically similar one (c -> k, s -> z, ...). Variants
keep the word's length and stay pronounceable, but are not dictionary
words, which widens the search space of a passphrase.

Examples:
    >>> sorted(garbled_variants("xyz"))
    ['xiz', 'xys', 'zyz']
"""

from types import MappingProxyType
from typing import Set


# =============================================================================
# Substitution Table
# =============================================================================
# One replacement per lowercase letter. 'h' has no counterpart.

PHONETIC_MAP = MappingProxyType({
    'a': 'e',
    'b': 'p',
    'c': 'k',
    'd': 't',
    'e': 'i',
    'f': 'v',
    'g': 'j',
    'i': 'y',
    'j': 'g',
    'k': 'c',
    'l': 'r',
    'm': 'n',
    'n': 'm',
    'o': 'u',
    'p': 'b',
    'q': 'k',
    'r': 'l',
    's': 'z',
    't': 'd',
    'u': 'o',
    'v': 'w',
    'w': 'v',
    'x': 'z',
    'y': 'i',
    'z': 's',
})


def substitute(ch: str) -> str:
    """
    Return the phonetic replacement for a single character.

    The case of the input is preserved. Characters without a mapping
    are returned unchanged.
    """
    mapped = PHONETIC_MAP.get(ch.lower())
    if mapped is None:
        return ch
    return mapped.upper() if ch.isupper() else mapped


def garbled_variants(word: str) -> Set[str]:
    """
    Return all single-substitution variants of a word.

    Each variant replaces exactly one mappable character. Positions whose
    replacement would equal the original letter are skipped, and the
    original word itself is never part of the result.

    Args:
        word: Word to garble

    Returns:
        Set of distinct variants (empty if nothing is substitutable)
    """
    results = set()
    for idx, ch in enumerate(word):
        rep = substitute(ch)
        if rep.lower() == ch.lower():
            continue
        candidate = word[:idx] + rep + word[idx + 1:]
        if candidate != word:
            results.add(candidate)
    return results
