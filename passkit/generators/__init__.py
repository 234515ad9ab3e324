#!/usr/bin/env python3
"""
Passphrase Generation Engine
============================
- entropy: Unbiased secure random index selection
- garbler: Single-letter phonetic word variants
- wordlist: Word list parsing, bundled lists, effective list derivation
- builder: Passphrase assembly (selection, shuffle, capitalization, digit)
- counter: Exact search-space counting and entropy
"""

from .entropy import (
    SecureIndexSampler,
    get_sampler,
    secure_index,
)
from .garbler import (
    PHONETIC_MAP,
    substitute,
    garbled_variants,
)
from .wordlist import (
    WordListManager,
    parse_word_list,
    load_word_file,
    load_builtin,
    list_builtin,
    builtin_names,
    effective_list,
)
from .builder import (
    PassphraseBuilder,
    build_passphrase,
    capitalize_word,
)
from .counter import (
    SpaceCount,
    binomial,
    entropy_bits,
    digit_multiplier,
    count_space,
    length_range,
)

__all__ = [
    # Entropy
    'SecureIndexSampler',
    'get_sampler',
    'secure_index',
    # Garbling
    'PHONETIC_MAP',
    'substitute',
    'garbled_variants',
    # Word lists
    'WordListManager',
    'parse_word_list',
    'load_word_file',
    'load_builtin',
    'list_builtin',
    'builtin_names',
    'effective_list',
    # Builder
    'PassphraseBuilder',
    'build_passphrase',
    'capitalize_word',
    # Counting
    'SpaceCount',
    'binomial',
    'entropy_bits',
    'digit_multiplier',
    'count_space',
    'length_range',
]
