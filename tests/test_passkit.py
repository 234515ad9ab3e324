"""
Tests for PassKit Main Class
============================
Tests the PassKit facade: word list selection, generation results,
search-space counting and error propagation.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import passkit
from passkit import (
    DigitPolicy,
    EmptyWordList,
    GenerationConfig,
    GenerationResult,
    InsufficientWords,
    ConfigError,
    PassKit,
    SecureIndexSampler,
    WordListError,
    count_space,
)

WORDS = ["apple", "river", "stone", "cloud", "maple", "tiger"]


class ScriptedSource:
    """Returns pre-set 32-bit values in order."""

    def __init__(self, values):
        self.values = list(values)

    def __call__(self):
        return self.values.pop(0)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from PASSKIT_* variables and any local .env file."""
    monkeypatch.chdir(tmp_path)
    for key in ("PASSKIT_WORD_COUNT", "PASSKIT_SEPARATOR", "PASSKIT_GARBLE_MAX",
                "PASSKIT_DIGIT", "PASSKIT_WORDLIST"):
        monkeypatch.delenv(key, raising=False)


class TestPassKitInit:
    """Tests for PassKit initialization."""

    def test_default_loads_shortlist(self):
        kit = PassKit()
        assert kit.words.source == "shortlist"
        assert len(kit.words) >= 200

    def test_named_wordlist(self):
        kit = PassKit(wordlist="3letter")
        assert all(len(w) == 3 for w in kit.words.base)

    def test_custom_words_take_precedence(self):
        kit = PassKit(words=["Owl", "owl", "elk"], wordlist="longlist")
        assert kit.words.base == frozenset({"owl", "elk"})

    def test_string_words(self):
        kit = PassKit(words="apple")
        assert kit.words.base == frozenset({"apple"})

    def test_unknown_wordlist(self):
        with pytest.raises(WordListError):
            PassKit(wordlist="nope")


class TestPassKitGenerate:
    """Tests for PassKit.generate()."""

    @pytest.fixture
    def kit(self):
        return PassKit(words=WORDS)

    def test_default_config(self, kit):
        """Defaults: four words joined with '-', no digit."""
        result = kit.generate()
        assert isinstance(result, GenerationResult)
        parts = result.passphrase.split("-")
        assert len(parts) == 4
        assert all(p.lower() in WORDS for p in parts)
        assert str(result) == result.passphrase

    def test_overrides(self, kit):
        result = kit.generate(word_count=3, separator=".", digit_policy="end")
        parts = result.passphrase.split(".")
        assert len(parts) == 4
        assert parts[-1].isdigit()
        assert result.config.digit_policy is DigitPolicy.END

    def test_explicit_config(self, kit):
        config = GenerationConfig(word_count=2, separator="_")
        result = kit.generate(config)
        assert result.config is config
        assert len(result.passphrase.split("_")) == 2

    def test_space_matches_counter(self, kit):
        result = kit.generate(word_count=3, digit_policy="anywhere")
        expected = count_space(len(WORDS), 0, 3, 0, DigitPolicy.ANYWHERE)
        assert result.space == expected

    def test_length_within_range(self, kit):
        for _ in range(50):
            result = kit.generate(word_count=3, garble_max=2, digit_policy="anywhere")
            assert result.min_length <= result.length <= result.max_length

    def test_garbling_grows_space(self, kit):
        plain = kit.generate(word_count=4)
        garbled = kit.generate(word_count=4, garble_max=2)
        assert garbled.space.count > plain.space.count

    def test_garble_clamped(self, kit):
        result = kit.generate(word_count=2, garble_max=9)
        assert result.space == kit.count(word_count=2, garble_max=2)

    def test_deterministic_sampler(self):
        kit = PassKit(words=["alpha", "bravo", "charlie"],
                      sampler=SecureIndexSampler(ScriptedSource([2, 0, 1])))
        result = kit.generate(word_count=2, separator="-")
        assert result.passphrase == "Charlie-Alpha"

    def test_long_passphrase(self):
        """Word count has no upper bound outside the CLI."""
        kit = PassKit(wordlist="longlist")
        size = len(kit.words)
        result = kit.generate(word_count=100)
        assert len(result.passphrase.split("-")) == 100
        assert result.space.count == size ** 100
        assert kit.count(word_count=100, digit_policy="end").count == size ** 100 * 10

    def test_generate_many(self, kit):
        results = kit.generate_many(5, word_count=2)
        assert len(results) == 5
        assert all(len(r.passphrase.split("-")) == 2 for r in results)
        with pytest.raises(ConfigError):
            kit.generate_many(0)


class TestPassKitErrors:
    """Tests for error propagation."""

    def test_insufficient_words(self):
        kit = PassKit(words=["cat", "dog"])
        with pytest.raises(InsufficientWords):
            kit.generate(word_count=3)

    def test_count_allows_short_list(self):
        """Counting repeats words, so a short list still has a space."""
        kit = PassKit(words=["cat", "dog"])
        assert kit.count(word_count=3).count == 8

    def test_count_empty_word_list(self):
        with pytest.raises(EmptyWordList):
            PassKit(words=[]).count(word_count=2)

    def test_variants_make_up_shortfall(self):
        """The effective list, not the base list, must cover word_count."""
        kit = PassKit(words=["cat", "dog"])
        result = kit.generate(word_count=3, garble_max=1)
        assert len(result.passphrase.split("-")) == 3

    def test_empty_word_list(self):
        kit = PassKit(words=[])
        with pytest.raises(EmptyWordList, match="word list is empty"):
            kit.generate(word_count=1)

    def test_bad_override(self):
        kit = PassKit(words=WORDS)
        with pytest.raises(ConfigError):
            kit.generate(separator="toolong")


class TestPassKitStatistics:
    """Tests for count(), length_range() and variants()."""

    def test_count_examples(self):
        kit = PassKit(words=["ab", "cd", "ef"])
        space = kit.count(word_count=4, garble_max=0, digit_policy="none")
        assert space.count == 81
        assert space.strength == 6

    def test_count_with_variants(self):
        kit = PassKit(words=["cat", "dog"])
        # V = 6 variants, n=2, g=1, END: (4 + 2*6*2) * 10
        assert kit.count(word_count=2, garble_max=1, digit_policy="end").count == 280

    def test_count_is_independent_of_generation(self):
        kit = PassKit(words=WORDS)
        before = kit.count(word_count=3)
        kit.generate(word_count=3)
        assert kit.count(word_count=3) == before

    def test_length_range(self):
        kit = PassKit(words=["ab", "abcd"])
        assert kit.length_range(word_count=2, separator="-") == (5, 9)

    def test_variants(self):
        assert PassKit(words=WORDS).variants("xyz") == {"zyz", "xiz", "xys"}


class TestConvenience:
    """Tests for module-level helpers."""

    def test_generate(self):
        result = passkit.generate(words=WORDS, word_count=2)
        assert len(result.passphrase.split("-")) == 2

    def test_count(self):
        assert passkit.count(words=["ab", "cd", "ef"], word_count=4).count == 81

    def test_version(self):
        assert passkit.__version__
