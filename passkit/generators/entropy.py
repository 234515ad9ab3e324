#!/usr/bin/env python3
"""
Entropy Module for Passphrase Generation
========================================
Unbiased random index selection from a cryptographically secure source.

Every random decision made while building a passphrase (word picks,
shuffle swaps, the digit and its position) goes through
SecureIndexSampler.next_index(), which uses rejection sampling over
32-bit draws so that no index is favored by modulo bias.

Uses:
- secrets.randbits(32) as the default 32-bit source (os.urandom backed)
"""

import secrets
from typing import Any, Callable, List, MutableSequence, Optional, Sequence

from passkit.errors import InvalidBound


# Width of a single draw from the underlying source
SOURCE_BITS = 32
SOURCE_RANGE = 1 << SOURCE_BITS


def _system_source() -> int:
    """Return a uniformly random unsigned 32-bit integer."""
    return secrets.randbits(SOURCE_BITS)


# =============================================================================
# Secure Index Sampler
# =============================================================================

class SecureIndexSampler:
    """
    Uniform random integers in [0, bound) without modulo bias.

    For a bound n the sampler computes limit = floor(2^32 / n) * n and
    discards any 32-bit draw >= limit, so each residue mod n is backed
    by exactly the same number of accepted draws. At most half of all
    draws can be rejected, so the expected number of draws is <= 2.

    Parameters
    ----------
    source : callable, optional
        Zero-argument callable returning an unsigned 32-bit integer.
        Defaults to secrets.randbits(32). Tests may inject a scripted
        source; production code should not.
    """

    def __init__(self, source: Optional[Callable[[], int]] = None):
        self._source = source or _system_source

    def _draw(self) -> int:
        value = self._source()
        if not 0 <= value < SOURCE_RANGE:
            raise ValueError(f"Random source returned {value}, outside 32-bit range")
        return value

    def next_index(self, bound: int) -> int:
        """
        Return a uniformly random integer in [0, bound).

        Raises:
            InvalidBound: If bound <= 0 or bound > 2^32
        """
        if bound <= 0:
            raise InvalidBound(f"bound must be > 0, got {bound}")
        if bound > SOURCE_RANGE:
            raise InvalidBound(f"bound must be <= 2^{SOURCE_BITS}, got {bound}")

        limit = (SOURCE_RANGE // bound) * bound
        while True:
            value = self._draw()
            if value < limit:
                return value % bound

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from a non-empty sequence."""
        return seq[self.next_index(len(seq))]

    def choices(self, seq: Sequence[Any], k: int) -> List[Any]:
        """Return k elements drawn with replacement."""
        return [self.choice(seq) for _ in range(k)]

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Shuffle a list in place (Fisher-Yates, last index first)."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.next_index(i + 1)
            seq[i], seq[j] = seq[j], seq[i]


# Module-level default sampler
_default_sampler = None


def get_sampler() -> SecureIndexSampler:
    """Get the shared system-backed sampler."""
    global _default_sampler
    if _default_sampler is None:
        _default_sampler = SecureIndexSampler()
    return _default_sampler


def secure_index(bound: int) -> int:
    """Convenience: uniformly random integer in [0, bound)."""
    return get_sampler().next_index(bound)
