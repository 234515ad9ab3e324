#!/usr/bin/env python3
"""
Word List Management
====================
Parsing raw word input, loading the bundled word lists, and deriving the
effective word list (base words plus their garbled variants).

Usage:
    from passkit.generators.wordlist import WordListManager

    manager = WordListManager.from_builtin("shortlist")
    effective = manager.effective(garble_max=2)
    print(manager.summary(garble_max=2))
"""

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Tuple

from passkit.errors import WordListError
from passkit.generators.garbler import garbled_variants
from passkit.settings import get_setting, resolve_path

logger = logging.getLogger(__name__)

# Raw input separators: runs of newlines, carriage returns and commas
_SPLIT_RE = re.compile(r'[\r\n,]+')


# =============================================================================
# Parsing
# =============================================================================

def parse_word_list(text: str) -> List[str]:
    """
    Parse raw text into a clean, deduplicated word list.

    Words are separated by newlines, carriage returns or commas, trimmed
    and lowercased. Empty entries are dropped and the first occurrence
    of a duplicate wins.
    """
    seen = set()
    words = []
    for raw in _SPLIT_RE.split(text or ""):
        word = raw.strip().lower()
        if not word or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def load_word_file(path) -> List[str]:
    """
    Read and parse a word list file (UTF-8).

    Raises:
        WordListError: If the file yields no words
        OSError: If the file cannot be read
    """
    path = Path(path)
    words = parse_word_list(path.read_text(encoding="utf-8"))
    if not words:
        raise WordListError("Uploaded file contained no valid words.")
    logger.debug(f"Loaded {len(words)} words from {path}")
    return words


# =============================================================================
# Built-in Lists
# =============================================================================

def _builtin_files() -> Dict[str, str]:
    files = get_setting('wordlists.builtin', {}) or {}
    if not files:
        raise WordListError("No built-in word lists configured in app.yaml")
    return files


def _wordlists_dir() -> Path:
    return resolve_path(get_setting('wordlists.dir', 'wordlists'))


def builtin_names() -> List[str]:
    """Names of the bundled word lists."""
    return list(_builtin_files())


@lru_cache(maxsize=None)
def _load_builtin(name: str) -> Tuple[str, ...]:
    files = _builtin_files()
    if name not in files:
        available = ', '.join(files)
        raise WordListError(f"Unknown word list: {name}. Available: {available}")
    path = _wordlists_dir() / files[name]
    return tuple(parse_word_list(path.read_text(encoding="utf-8")))


def load_builtin(name: str) -> List[str]:
    """
    Load a bundled word list by name.

    Raises:
        WordListError: If no list of that name exists
    """
    return list(_load_builtin(name))


def list_builtin() -> Dict[str, int]:
    """Map each bundled list name to its number of words."""
    return {name: len(_load_builtin(name)) for name in builtin_names()}


# =============================================================================
# Effective List
# =============================================================================

def effective_list(base: Iterable[str], garble_max: int) -> FrozenSet[str]:
    """
    Return the words available for generation.

    With garble_max <= 0 this is just the base list. Otherwise every
    garbled variant of every base word is added, deduplicated against
    the base words and each other.
    """
    words = set(base)
    if garble_max <= 0:
        return frozenset(words)

    for word in list(words):
        words.update(garbled_variants(word))
    return frozenset(words)


class WordListManager:
    """
    Holds the base word list and derives effective lists from it.

    The base list is stored as an immutable set and only ever replaced
    as a whole. Effective lists are recomputed on every request.

    Examples
    --------
        >>> manager = WordListManager(["cat", "dog"])
        >>> manager.summary(garble_max=1)
        '2 words loaded (+6 variants available, max 1)'
    """

    def __init__(self, words: Iterable[str] = None, source: str = "custom"):
        self._base: FrozenSet[str] = frozenset()
        self.source = source
        if words is not None:
            self.replace(words, source=source)

    @classmethod
    def from_builtin(cls, name: str) -> "WordListManager":
        """Create a manager holding a bundled list."""
        manager = cls()
        manager.load_builtin(name)
        return manager

    # -------------------------------------------------------------------------
    # Base list
    # -------------------------------------------------------------------------

    @property
    def base(self) -> FrozenSet[str]:
        """The current base word list."""
        return self._base

    def __len__(self) -> int:
        return len(self._base)

    def replace(self, words: Iterable[str], source: str = "custom") -> None:
        """
        Replace the base list, normalizing words the same way parsing does.

        A plain string is treated as raw text (newline or comma separated),
        not as a sequence of characters.
        """
        if isinstance(words, str):
            words = parse_word_list(words)
        self._base = frozenset(parse_word_list("\n".join(words)))
        self.source = source
        logger.debug(f"Base word list replaced: {len(self._base)} words ({source})")

    def load_text(self, text: str) -> None:
        """Replace the base list with words parsed from raw text."""
        self.replace(parse_word_list(text), source="custom")

    def load_file(self, path) -> None:
        """Replace the base list with the contents of a word file."""
        self.replace(load_word_file(path), source=str(path))

    def load_builtin(self, name: str) -> None:
        """Replace the base list with a bundled list."""
        self.replace(load_builtin(name), source=name)

    def reset(self) -> None:
        """Reload the default bundled list."""
        self.load_builtin(get_setting('generation.wordlist', 'shortlist'))

    # -------------------------------------------------------------------------
    # Derived lists
    # -------------------------------------------------------------------------

    def effective(self, garble_max: int) -> FrozenSet[str]:
        """Base words plus garbled variants when garble_max > 0."""
        return effective_list(self._base, garble_max)

    def variant_count(self, garble_max: int) -> int:
        """Number of words in the effective list that are not base words."""
        return max(0, len(self.effective(garble_max)) - len(self._base))

    def summary(self, garble_max: int = 0) -> str:
        """Short human-readable description of the loaded words."""
        text = f"{len(self._base)} words loaded"
        if garble_max > 0:
            text += f" (+{self.variant_count(garble_max)} variants available, max {garble_max})"
        return text
