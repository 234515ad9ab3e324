#!/usr/bin/env python3
"""
PassKit - Memorable Passphrase Generator
========================================

Generates passphrases from a word list using a cryptographically secure,
bias-free random source. Words can optionally be "garbled" (one letter
swapped for a similar-sounding one) and a random digit can be added.
Every result reports the exact number of passphrases its settings could
have produced and the corresponding entropy in bits.

Quick Start
-----------
    from passkit import PassKit

    kit = PassKit()

    # One passphrase with default settings
    result = kit.generate()
    print(result.passphrase, result.space.strength)

    # Five words, up to two garbled, digit anywhere
    result = kit.generate(word_count=5, garble_max=2, digit_policy="anywhere")

    # Search space only
    space = kit.count(word_count=6)

Modules
-------
    passkit.generators - Sampler, garbler, word lists, builder, counter
    passkit.config     - GenerationConfig, DigitPolicy, environment defaults
    passkit.errors     - Exception hierarchy
    passkit.ui         - Rich terminal rendering

CLI Usage
---------
    python -m passkit generate -n 5 --garble 2 --digit anywhere
    python -m passkit count -n 6 --list longlist
    python -m passkit variants castle
    python -m passkit lists
"""

__version__ = "0.1.0"
__author__ = "PassKit"

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set

# =============================================================================
# Submodule Imports
# =============================================================================

from . import generators
from . import config
from . import errors

from .generators import (
    SecureIndexSampler,
    PassphraseBuilder,
    WordListManager,
    SpaceCount,
    garbled_variants,
    parse_word_list,
    load_builtin,
    list_builtin,
    effective_list,
    count_space,
    length_range,
    binomial,
    entropy_bits,
)
from .config import (
    DigitPolicy,
    GenerationConfig,
    get_config,
    default_wordlist,
)
from .errors import (
    PassKitError,
    InvalidBound,
    EmptyWordList,
    InsufficientWords,
    ConfigError,
    WordListError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Result Type
# =============================================================================

@dataclass(frozen=True)
class GenerationResult:
    """One generated passphrase and the statistics of its configuration."""
    passphrase: str
    space: SpaceCount
    min_length: int
    max_length: int
    config: GenerationConfig

    @property
    def length(self) -> int:
        return len(self.passphrase)

    def __str__(self) -> str:
        return self.passphrase


# =============================================================================
# PassKit Main Class
# =============================================================================

class PassKit:
    """
    Main interface for passphrase generation.

    Holds the base word list and a secure sampler, and combines the word
    list, builder and counter into a single call.

    Attributes
    ----------
    words : WordListManager
        The base word list (replace it wholesale to switch dictionaries)
    sampler : SecureIndexSampler
        Random source used for every decision

    Examples
    --------
        >>> kit = PassKit(words=["apple", "river", "stone", "cloud"])
        >>> result = kit.generate(word_count=3, separator=".")
        >>> len(result.passphrase.split("."))
        3
    """

    def __init__(self,
                 words: Iterable[str] = None,
                 wordlist: str = None,
                 sampler: SecureIndexSampler = None):
        """
        Initialize PassKit.

        Parameters
        ----------
        words : iterable of str, optional
            Custom base words. Takes precedence over wordlist.
        wordlist : str, optional
            Name of a bundled list. Defaults to the configured list.
        sampler : SecureIndexSampler, optional
            Random source; defaults to the system CSPRNG.
        """
        self.sampler = sampler or SecureIndexSampler()
        self._builder = PassphraseBuilder(self.sampler)

        if words is not None:
            self.words = WordListManager(words)
        else:
            self.words = WordListManager.from_builtin(wordlist or default_wordlist())

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @staticmethod
    def make_config(config: Optional[GenerationConfig] = None, **overrides) -> GenerationConfig:
        """
        Resolve a GenerationConfig from an optional base and keyword overrides.

        Without a base config, defaults come from app.yaml and the
        environment (see passkit.config.get_config).
        """
        base = config or get_config()
        if overrides:
            base = base.replace(**overrides)
        return base

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def _check_words(self, effective, cfg: GenerationConfig) -> None:
        if not effective:
            raise EmptyWordList()
        if len(effective) < cfg.word_count:
            raise InsufficientWords(len(effective), cfg.word_count)

    def generate(self, config: Optional[GenerationConfig] = None, **overrides) -> GenerationResult:
        """
        Generate one passphrase.

        Parameters
        ----------
        config : GenerationConfig, optional
            Settings to use; defaults to get_config()
        **overrides
            Field overrides: word_count, separator, garble_max, digit_policy

        Returns
        -------
        GenerationResult
            The passphrase with its search space and length range

        Raises
        ------
        EmptyWordList
            If no words are loaded
        InsufficientWords
            If fewer words are available than word_count
        ConfigError
            If an override is out of range
        """
        cfg = self.make_config(config, **overrides)
        base = self.words.base
        effective = effective_list(base, cfg.effective_garble_max)
        self._check_words(effective, cfg)

        passphrase = self._builder.build(base, effective, cfg)
        space = self._count(base, effective, cfg)
        min_len, max_len = length_range(effective, cfg.word_count, cfg.separator, cfg.digit_policy)

        return GenerationResult(
            passphrase=passphrase,
            space=space,
            min_length=min_len,
            max_length=max_len,
            config=cfg,
        )

    def generate_many(self, n: int, config: Optional[GenerationConfig] = None,
                      **overrides) -> List[GenerationResult]:
        """Generate n passphrases with the same settings."""
        if n < 1:
            raise ConfigError("Number of passphrases must be at least 1.")
        cfg = self.make_config(config, **overrides)
        return [self.generate(cfg) for _ in range(n)]

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def _count(self, base, effective, cfg: GenerationConfig) -> SpaceCount:
        variants = max(0, len(effective) - len(base))
        logger.debug(
            f"Counting space: B={len(base)} V={variants} n={cfg.word_count} "
            f"g={cfg.effective_garble_max} digit={cfg.digit_policy.value}"
        )
        return count_space(
            len(base), variants, cfg.word_count, cfg.effective_garble_max, cfg.digit_policy
        )

    def count(self, config: Optional[GenerationConfig] = None, **overrides) -> SpaceCount:
        """
        Exact search space and entropy for a configuration.

        Independent of any generated passphrase: words may repeat, so a
        list smaller than word_count still has a well-defined space.

        Raises
        ------
        EmptyWordList
            If no words are loaded
        """
        cfg = self.make_config(config, **overrides)
        base = self.words.base
        effective = effective_list(base, cfg.effective_garble_max)
        if not effective:
            raise EmptyWordList()
        return self._count(base, effective, cfg)

    def length_range(self, config: Optional[GenerationConfig] = None, **overrides) -> tuple:
        """Shortest and longest possible passphrase for a configuration."""
        cfg = self.make_config(config, **overrides)
        effective = self.words.effective(cfg.effective_garble_max)
        return length_range(effective, cfg.word_count, cfg.separator, cfg.digit_policy)

    def variants(self, word: str) -> Set[str]:
        """Garbled variants of a single word."""
        return garbled_variants(word)


# =============================================================================
# Convenience Functions
# =============================================================================

def generate(words: Iterable[str] = None, **kwargs) -> GenerationResult:
    """
    Quick generation using a default PassKit instance.

    See PassKit.generate() for full documentation.
    """
    kit = PassKit(words=words)
    return kit.generate(**kwargs)


def count(words: Iterable[str] = None, **kwargs) -> SpaceCount:
    """
    Quick search-space count using a default PassKit instance.

    See PassKit.count() for full documentation.
    """
    kit = PassKit(words=words)
    return kit.count(**kwargs)


# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Version
    '__version__',

    # Main class
    'PassKit',
    'GenerationResult',

    # Engine
    'SecureIndexSampler',
    'PassphraseBuilder',
    'WordListManager',
    'SpaceCount',
    'garbled_variants',
    'parse_word_list',
    'load_builtin',
    'list_builtin',
    'effective_list',
    'count_space',
    'length_range',
    'binomial',
    'entropy_bits',

    # Config
    'DigitPolicy',
    'GenerationConfig',
    'get_config',
    'default_wordlist',

    # Errors
    'PassKitError',
    'InvalidBound',
    'EmptyWordList',
    'InsufficientWords',
    'ConfigError',
    'WordListError',

    # Convenience functions
    'generate',
    'count',

    # Submodules
    'generators',
    'config',
    'errors',
]
