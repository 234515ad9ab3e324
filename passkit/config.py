#!/usr/bin/env python3
"""
Configuration Management
========================
Generation settings for passphrases: the digit policy, the immutable
per-call GenerationConfig, and defaults loaded from app.yaml with
overrides from a .env file or the process environment.
"""

import os
from dataclasses import dataclass, field, replace as dc_replace
from enum import Enum
from pathlib import Path
from typing import Optional

from passkit.errors import ConfigError
from passkit.settings import get_setting


# =============================================================================
# Digit Policy
# =============================================================================

class DigitPolicy(Enum):
    """Where (if anywhere) a random digit is added to the passphrase."""
    NONE = "none"
    END = "end"
    ANYWHERE = "anywhere"

    @classmethod
    def parse(cls, value) -> "DigitPolicy":
        """
        Resolve a policy from an enum member or a string.

        Accepts 'none', 'end', 'anywhere' in any case, plus the
        aliases 'at_end' / 'atend' for END.

        Raises:
            ConfigError: If the value names no known policy
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE

        key = str(value).strip().lower().replace('-', '_')
        aliases = {'at_end': 'end', 'atend': 'end', '': 'none'}
        key = aliases.get(key, key)
        for policy in cls:
            if policy.value == key:
                return policy

        available = ', '.join(p.value for p in cls)
        raise ConfigError(f"Unknown digit policy '{value}'. Available: {available}")

    @property
    def includes_digit(self) -> bool:
        return self is not DigitPolicy.NONE


# =============================================================================
# Generation Configuration
# =============================================================================

def _limit(name: str, fallback: int) -> int:
    return int(get_setting(f"limits.{name}", fallback))


@dataclass(frozen=True)
class GenerationConfig:
    """
    Settings for a single passphrase generation call.

    Attributes
    ----------
    word_count : int
        Number of words in the passphrase (>= 1)
    separator : str
        String placed between words; may be empty (max 4 characters)
    garble_max : int
        Maximum number of words that may be garbled variants (>= 0).
        Values above word_count are allowed and clamped on use.
    digit_policy : DigitPolicy
        Whether a digit is appended, inserted anywhere, or omitted
    """
    word_count: int = 4
    separator: str = "-"
    garble_max: int = 0
    digit_policy: DigitPolicy = field(default=DigitPolicy.NONE)

    def __post_init__(self):
        # Normalize the policy so callers may pass plain strings
        object.__setattr__(self, 'digit_policy', DigitPolicy.parse(self.digit_policy))

        if isinstance(self.word_count, bool) or not isinstance(self.word_count, int):
            raise ConfigError(f"Word count must be an integer, got {self.word_count!r}")
        if self.word_count < 1:
            raise ConfigError("Word count must be at least 1.")

        if self.separator is None:
            object.__setattr__(self, 'separator', "")
        if not isinstance(self.separator, str):
            raise ConfigError(f"Separator must be a string, got {self.separator!r}")
        max_sep = _limit('max_separator_length', 4)
        if len(self.separator) > max_sep:
            raise ConfigError(f"Separator must be at most {max_sep} characters.")

        if isinstance(self.garble_max, bool) or not isinstance(self.garble_max, int):
            raise ConfigError(f"Garble max must be an integer, got {self.garble_max!r}")
        if self.garble_max < 0:
            raise ConfigError("Garble max cannot be negative.")

    @property
    def effective_garble_max(self) -> int:
        """Garble max clamped to the word count."""
        return min(self.garble_max, self.word_count)

    @property
    def includes_digit(self) -> bool:
        return self.digit_policy.includes_digit

    def clamped(self) -> "GenerationConfig":
        """Return a copy with garble_max clamped to word_count."""
        if self.garble_max <= self.word_count:
            return self
        return dc_replace(self, garble_max=self.word_count)

    def replace(self, **changes) -> "GenerationConfig":
        """Return a validated copy with the given fields changed."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return dc_replace(self, **changes)


# =============================================================================
# Environment Loading
# =============================================================================

ENV_PREFIX = "PASSKIT_"


def load_env(env_path: Path = None) -> dict:
    """Load environment variables from .env file."""
    if env_path is None:
        # Look for .env in the working directory
        env_path = Path.cwd() / '.env'

    env_vars = {}
    if env_path.exists():
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if '=' in line and not line.startswith('#'):
                key, value = line.split('=', 1)
                env_vars[key.strip()] = value.strip()
                os.environ.setdefault(key.strip(), value.strip())

    return env_vars


def _env_value(env: dict, name: str) -> Optional[str]:
    key = ENV_PREFIX + name
    value = env.get(key)
    if value is None:
        value = os.environ.get(key)
    return value


def _env_int(env: dict, name: str, default: int) -> int:
    value = _env_value(env, name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got '{value}'") from None


def get_config(env_path: Path = None) -> GenerationConfig:
    """Get the default generation configuration (app.yaml + environment)."""
    env = load_env(env_path)

    separator = _env_value(env, 'SEPARATOR')
    if separator is None:
        separator = get_setting('generation.separator', "-")

    return GenerationConfig(
        word_count=_env_int(env, 'WORD_COUNT', int(get_setting('generation.word_count', 4))),
        separator=separator,
        garble_max=_env_int(env, 'GARBLE_MAX', int(get_setting('generation.garble_max', 0))),
        digit_policy=_env_value(env, 'DIGIT') or get_setting('generation.digit', 'none'),
    )


def default_wordlist(env_path: Path = None) -> str:
    """Name of the built-in word list used when none is given."""
    env = load_env(env_path)
    return _env_value(env, 'WORDLIST') or get_setting('generation.wordlist', 'shortlist')


__all__ = [
    'DigitPolicy',
    'GenerationConfig',
    'load_env',
    'get_config',
    'default_wordlist',
]
