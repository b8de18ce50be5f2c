"""Tests for password strength scoring and entropy estimation."""

import math

import pytest

from peselkit.core.models import PasswordMetrics
from peselkit.password import (
    EntropyEstimator,
    PasswordStrengthScorer,
    SymbolSet,
    charsets_for,
    estimate_entropy,
    load_blacklist,
    parse_blacklist,
    penalize_construction,
    penalize_repeats,
    score_password,
)


class TestCharsets:
    def test_unrestricted_symbols(self):
        names = [cs.name for cs in charsets_for(False)]
        assert names == ["lowercase", "uppercase", "numbers", "symbols"]
        assert [cs.length for cs in charsets_for(False)] == [26, 26, 10, 33]

    def test_restricted_symbols(self):
        assert charsets_for(True)[-1].length == 11
        assert charsets_for(SymbolSet.RESTRICTED)[-1].length == 11

    def test_variant_names_and_loose_flags(self):
        assert charsets_for("restricted")[-1].length == 11
        assert charsets_for("unrestricted")[-1].length == 33
        assert charsets_for(None)[-1].length == 33
        assert charsets_for(1)[-1].length == 11

    def test_symbol_counting(self):
        restricted = charsets_for(SymbolSet.RESTRICTED)[-1]
        unrestricted = charsets_for(SymbolSet.UNRESTRICTED)[-1]
        assert restricted.count("a!b~c") == 1
        assert unrestricted.count("a!b~c") == 2
        assert unrestricted.count("pass word") == 1


class TestScorePassword:
    """Tests for score_password()."""

    def test_empty_returns_none(self):
        assert score_password("") is None
        assert score_password(None) is None

    def test_repeated_short(self):
        metrics = score_password("aaa", False, [])
        assert isinstance(metrics, PasswordMetrics)
        assert metrics.penalize_repeats == 1
        assert metrics.penalize_length == 1
        assert metrics.penalize_construction == 0
        assert metrics.penalize_blacklisted == 0

    def test_basic_metrics(self):
        metrics = score_password("aaa")
        assert metrics.password_length == 3
        assert metrics.charsets["lowercase"].count == 3
        assert metrics.charsets["uppercase"].count == 0
        assert metrics.total_alphabet_size == 95
        assert metrics.used_alphabet_size == 26
        assert metrics.variations == 26**3
        assert metrics.entropy_bits == 14  # 3 * log2(26) = 14.1
        assert metrics.entropy_pow == 2**14
        assert metrics.strength_percent == 27.37
        assert metrics.complexity == 78

    def test_mixed_classes(self):
        metrics = score_password("Ab1!")
        assert metrics.used_alphabet_size == 95
        assert metrics.strength_percent == 100.0
        assert metrics.complexity == 26 + 26 + 10 + 33
        assert metrics.entropy_bits == round(4 * math.log2(95))

    def test_common_symbols_mode(self):
        common = score_password("abc~", use_common_symbols=True)
        assert common.charsets["symbols"].count == 0
        assert common.charsets["symbols"].length == 11
        assert common.total_alphabet_size == 73
        assert common.used_alphabet_size == 26

        full = score_password("abc~", use_common_symbols=False)
        assert full.charsets["symbols"].count == 1
        assert full.used_alphabet_size == 26 + 33

    def test_missing_flag_means_all_symbols(self):
        metrics = score_password("abc~", None)
        assert metrics.charsets["symbols"].length == 33
        assert metrics.charsets["symbols"].count == 1

    def test_int_flag_by_truthiness(self):
        assert score_password("abc~", 1).charsets["symbols"].length == 11
        assert score_password("abc~", 0).charsets["symbols"].length == 33

    def test_no_recognized_charset(self):
        metrics = score_password("~~~", use_common_symbols=True)
        assert metrics.used_alphabet_size == 0
        assert metrics.entropy_bits == 0
        assert metrics.entropy_pow == 1
        assert metrics.variations == 0
        assert metrics.strength_percent == 0.0
        assert metrics.complexity == 0
        assert metrics.penalize_repeats == 1

    def test_long_password_exact_variations(self):
        metrics = score_password("a" * 100)
        assert metrics.variations == 26**100
        assert metrics.penalize_repeats == 98

    def test_blacklisted(self):
        assert score_password("letmein", blacklist={"letmein"}).penalize_blacklisted == 1
        assert score_password("letmein2", blacklist={"letmein"}).penalize_blacklisted == 0
        assert score_password("letmein", blacklist=["letmein"]).penalize_blacklisted == 1

    def test_length_penalty_boundary(self):
        assert score_password("abcdefg").penalize_length == 1
        assert score_password("abcdefgh").penalize_length == 0

    def test_frozen(self):
        metrics = score_password("aaa")
        with pytest.raises(Exception):
            metrics.password = "bbb"

    def test_flat_dict(self):
        flat = score_password("Abc12345").to_flat_dict()
        assert flat["chars_lowercase_count"] == 2
        assert flat["chars_uppercase_count"] == 1
        assert flat["chars_numbers_count"] == 5
        assert flat["chars_symbols_count"] == 0
        assert flat["chars_numbers_length"] == 10
        assert flat["chars_total"] == 95
        assert flat["chars_used"] == 62
        assert flat["password_length"] == 8
        assert flat["calc_entropy"] == round(8 * math.log2(62))
        assert flat["calc_variations"] == 62**8
        for key in (
            "penalize_construction",
            "penalize_blacklisted",
            "penalize_length",
            "penalize_repeats",
        ):
            assert key in flat


class TestPenalizeConstruction:
    """Weak construction patterns."""

    def test_capitalized_word(self):
        assert score_password("Abcdef", False, []).penalize_construction == 1

    def test_letters_then_digits(self):
        assert penalize_construction("Password1") == 1
        assert penalize_construction("abc123") == 1
        assert penalize_construction("abc1234") == 0

    def test_letters_then_one_symbol(self):
        assert penalize_construction("password!") == 1
        assert penalize_construction("password!!") == 0

    def test_digit_in_middle(self):
        assert penalize_construction("Pass1word") == 0

    def test_all_lowercase_not_penalized(self):
        assert penalize_construction("abcdef") == 0

    def test_two_capitals(self):
        assert penalize_construction("ABcdef") == 0


class TestPenalizeRepeats:
    def test_overlapping_windows(self):
        assert penalize_repeats("aaaa") == 2
        assert penalize_repeats("aaabbb") == 2
        assert penalize_repeats("aabbaa") == 0

    def test_short(self):
        assert penalize_repeats("") == 0
        assert penalize_repeats("aa") == 0


class TestBlacklistLoading:
    def test_parse(self):
        words = parse_blacklist(["# common passwords\n", "123456\n", "\n", "  qwerty  \n"])
        assert words == frozenset({"123456", "qwerty"})

    def test_load_file(self, tmp_path):
        path = tmp_path / "blacklist.txt"
        path.write_text("password\nletmein\n\n", encoding="utf-8")
        words = load_blacklist(path)
        assert words == frozenset({"password", "letmein"})
        assert score_password("letmein", blacklist=words).penalize_blacklisted == 1

    def test_load_file_with_invalid_utf8(self, tmp_path):
        path = tmp_path / "leaked.txt"
        path.write_bytes(b"password\n\xe9t\xe9\nletmein\n")
        words = load_blacklist(path)
        assert {"password", "letmein"} <= words
        assert len(words) == 3
        assert score_password("letmein", blacklist=words).penalize_blacklisted == 1


class TestEstimateEntropy:
    """Tests for estimate_entropy()."""

    def test_all_zero(self):
        assert estimate_entropy(0, 0, 0, 0) == 0
        assert estimate_entropy() == 0

    def test_missing_counts(self):
        assert estimate_entropy(None, None, None, None) == 0
        assert estimate_entropy(8, None) == 38

    def test_lowercase_only(self):
        assert estimate_entropy(8) == 38  # 8 * log2(26) = 37.6

    def test_special_pool_is_26(self):
        assert estimate_entropy(0, 0, 0, 8) == estimate_entropy(8, 0, 0, 0)

    def test_all_classes(self):
        # pool 88, length 4 -> 25.84
        assert estimate_entropy(1, 1, 1, 1) == 26

    def test_string_counts(self):
        assert estimate_entropy("3", "0", "", None) == 14

    def test_monotonic_in_length(self):
        values = [estimate_entropy(n, 0, 2, 0) for n in range(1, 30)]
        assert all(a < b for a, b in zip(values, values[1:]))


class TestPasswordFacades:
    def test_scorer(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("hunter2\n")
        words = PasswordStrengthScorer.load_blacklist(path)
        metrics = PasswordStrengthScorer.score("hunter2", False, words)
        assert metrics.penalize_blacklisted == 1
        assert PasswordStrengthScorer.min_length == 8

    def test_estimator(self):
        assert EntropyEstimator.estimate(8) == 38
        assert EntropyEstimator.pool_sizes == (26, 26, 10, 26)
