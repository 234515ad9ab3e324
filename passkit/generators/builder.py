#!/usr/bin/env python3
"""
Passphrase Builder
==================
Assembles a passphrase from a base word list and its effective
(garble-inclusive) list:

1. Pick up to garble_max words from the effective list
2. Pick the remaining words from the base list
3. Shuffle so garbled and base picks are interleaved
4. Capitalize each word and join with the separator
5. Optionally add a random digit at the end or in any slot

All picks are made with replacement, and every random decision uses the
injected SecureIndexSampler.
"""

import logging
from typing import Collection, List, Optional, Sequence

from passkit.config import DigitPolicy, GenerationConfig
from passkit.errors import EmptyWordList, InsufficientWords
from passkit.generators.entropy import SecureIndexSampler, get_sampler

logger = logging.getLogger(__name__)


def capitalize_word(word: str) -> str:
    """Uppercase the first character, leaving the rest unchanged."""
    if not word:
        return word
    return word[0].upper() + word[1:]


def _as_sequence(words: Collection[str]) -> Sequence[str]:
    # Sets have no stable order; sort so a given sampler state always
    # maps to the same word
    if isinstance(words, (list, tuple)):
        return words
    return sorted(words)


class PassphraseBuilder:
    """
    Builds passphrases from word lists and a GenerationConfig.

    Parameters
    ----------
    sampler : SecureIndexSampler, optional
        Source of random indices. Defaults to the shared system sampler.

    Examples
    --------
        >>> builder = PassphraseBuilder()
        >>> config = GenerationConfig(word_count=3, separator="-")
        >>> builder.build(["apple", "river", "stone"], None, config)  # doctest: +SKIP
        'Stone-Apple-Stone'
    """

    def __init__(self, sampler: Optional[SecureIndexSampler] = None):
        self.sampler = sampler or get_sampler()

    def select(self,
               base: Collection[str],
               effective: Collection[str],
               config: GenerationConfig) -> List[str]:
        """
        Pick and shuffle the words for one passphrase (not yet capitalized).

        Raises:
            EmptyWordList: If no words are available
            InsufficientWords: If the effective list is smaller than word_count
        """
        if effective is None:
            effective = base
        if not effective:
            raise EmptyWordList()
        if len(effective) < config.word_count:
            raise InsufficientWords(len(effective), config.word_count)

        garble_max = config.effective_garble_max
        garbled_pool = _as_sequence(effective)
        base_pool = _as_sequence(base)

        picked = []
        if garble_max > 0:
            picked.extend(self.sampler.choices(garbled_pool, garble_max))
        remaining = config.word_count - garble_max
        if remaining > 0:
            if not base_pool:
                raise EmptyWordList()
            picked.extend(self.sampler.choices(base_pool, remaining))

        self.sampler.shuffle(picked)
        return picked

    def add_digit(self, words: List[str], policy: DigitPolicy) -> List[str]:
        """
        Return the token sequence with a digit added according to policy.

        END appends the digit as a final token. ANYWHERE inserts it into
        one of len(words) + 1 slots, chosen uniformly.
        """
        policy = DigitPolicy.parse(policy)
        if policy is DigitPolicy.NONE:
            return list(words)

        digit = str(self.sampler.next_index(10))
        tokens = list(words)
        if policy is DigitPolicy.END:
            tokens.append(digit)
        else:
            pos = self.sampler.next_index(len(tokens) + 1)
            tokens.insert(pos, digit)
        return tokens

    def build(self,
              base: Collection[str],
              effective: Optional[Collection[str]],
              config: GenerationConfig) -> str:
        """
        Build one passphrase.

        Args:
            base: Base word list
            effective: Effective word list (base plus variants); None
                means the base list is used
            config: Generation settings

        Returns:
            The passphrase string
        """
        words = self.select(base, effective, config)
        words = [capitalize_word(w) for w in words]
        tokens = self.add_digit(words, config.digit_policy)

        logger.debug(
            f"Built passphrase: {config.word_count} words, "
            f"garble_max={config.effective_garble_max}, digit={config.digit_policy.value}"
        )
        return config.separator.join(tokens)


def build_passphrase(base: Collection[str],
                     effective: Optional[Collection[str]],
                     config: GenerationConfig,
                     sampler: Optional[SecureIndexSampler] = None) -> str:
    """Convenience wrapper around PassphraseBuilder.build()."""
    return PassphraseBuilder(sampler).build(base, effective, config)
