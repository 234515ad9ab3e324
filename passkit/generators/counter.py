#!/usr/bin/env python3
"""
Search Space Counting
=====================
Exact number of distinct passphrases a configuration can produce, and
the corresponding entropy in bits.

With B base words, V variants (effective list size minus B), n words
and up to g garbled positions:

    count = sum_{k=0}^{min(g, n)} C(n, k) * V^k * B^(n-k)

multiplied by 10 for a digit at the end, or by 10 * (n + 1) for a digit
in any slot. All arithmetic uses Python integers, so counts never
overflow; entropy is derived from the integer's bit length so it stays
accurate far beyond the range of a float.
"""

import math
from dataclasses import dataclass
from typing import Collection, Tuple

from passkit.config import DigitPolicy
from passkit.errors import EmptyWordList

# Integers up to this many bits convert to float without losing the
# leading 53 significant bits
_FLOAT_SAFE_BITS = 1000


# =============================================================================
# Arithmetic
# =============================================================================

def binomial(n: int, k: int) -> int:
    """
    Binomial coefficient C(n, k) using the multiplicative formula.

    Each intermediate product is divisible by i, so the integer
    division is exact. Returns 0 when k < 0 or k > n.
    """
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * (n - k + i) // i
    return result


def entropy_bits(count: int) -> float:
    """
    Base-2 logarithm of an arbitrarily large non-negative integer.

    Large values are shifted right so the float conversion only sees
    the leading bits; the shift is added back exactly. Returns 0.0 for
    a count of 0 (an empty space has no entropy).
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count <= 1:
        return 0.0

    shift = max(0, count.bit_length() - _FLOAT_SAFE_BITS)
    return math.log2(count >> shift) + shift


# =============================================================================
# Space Count
# =============================================================================

@dataclass(frozen=True)
class SpaceCount:
    """Exact search-space size and its entropy in bits."""
    count: int
    bits: float

    @property
    def formatted(self) -> str:
        """Count with thousands separators."""
        return f"{self.count:,}"

    @property
    def strength(self) -> int:
        """Entropy rounded down to whole bits."""
        return math.floor(self.bits)

    def __str__(self) -> str:
        return f"{self.formatted} (~{self.strength} bits)"


def digit_multiplier(word_count: int, digit_policy) -> int:
    """Number of ways the digit policy can extend a word sequence."""
    policy = DigitPolicy.parse(digit_policy)
    if policy is DigitPolicy.END:
        return 10
    if policy is DigitPolicy.ANYWHERE:
        return 10 * (word_count + 1)
    return 1


def count_space(base_size: int,
                variant_size: int,
                word_count: int,
                garble_max: int,
                digit_policy=DigitPolicy.NONE) -> SpaceCount:
    """
    Count the distinct passphrases a configuration can produce.

    Args:
        base_size: Number of base words (B)
        variant_size: Number of variants not in the base list (V);
            negative values are treated as 0
        word_count: Words per passphrase
        garble_max: Maximum garbled positions (clamped to word_count)
        digit_policy: DigitPolicy or its string value

    Returns:
        SpaceCount with the exact count and entropy in bits
    """
    base_size = max(0, base_size)
    variant_size = max(0, variant_size)
    max_garbled = max(0, min(garble_max, word_count))

    total = 0
    for k in range(max_garbled + 1):
        total += (
            binomial(word_count, k)
            * variant_size ** k
            * base_size ** (word_count - k)
        )

    total *= digit_multiplier(word_count, digit_policy)
    return SpaceCount(count=total, bits=entropy_bits(total))


# =============================================================================
# Length Range
# =============================================================================

def length_range(effective: Collection[str],
                 word_count: int,
                 separator: str,
                 digit_policy=DigitPolicy.NONE) -> Tuple[int, int]:
    """
    Shortest and longest possible passphrase length.

    Raises:
        EmptyWordList: If the effective list is empty
    """
    if not effective:
        raise EmptyWordList()

    lengths = [len(w) for w in effective]
    joins = len(separator) * (word_count - 1)
    min_len = min(lengths) * word_count + joins
    max_len = max(lengths) * word_count + joins

    if DigitPolicy.parse(digit_policy).includes_digit:
        # One more separator plus the digit itself
        min_len += len(separator) + 1
        max_len += len(separator) + 1

    return min_len, max_len
