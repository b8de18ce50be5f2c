"""Tests for identifier-space counting and range enumeration."""

from datetime import date
from itertools import islice

import pytest

from peselkit.core.models import GenderFilter, RangeEntry
from peselkit.identifier import (
    CombinatoricsCounter,
    InvalidInput,
    RangeGenerator,
    count_combinations,
    decode,
    enumerate_range,
    gender_of,
    generate_identifiers,
    validate,
)


class TestCountCombinations:
    """Tests for count_combinations()."""

    def test_single_day(self):
        day = date(1990, 5, 17)
        assert count_combinations(day, day, True) == 5000
        assert count_combinations(day, day, False) == 10000

    def test_two_days(self):
        assert count_combinations(date(1990, 5, 17), date(1990, 5, 18), True) == 10000

    def test_leap_year(self):
        assert (
            count_combinations(date(2000, 1, 1), date(2000, 12, 31), False)
            == 366 * 10000
        )

    def test_accepts_tuples_and_strings(self):
        assert count_combinations(("1990", "5", "17"), "1990-05-19", True) == 15000

    def test_reversed_range_is_empty(self):
        assert count_combinations(date(1990, 5, 18), date(1990, 5, 17), True) == 0
        assert count_combinations(date(1990, 5, 30), date(1990, 5, 1), False) == 0


class TestEnumerateRange:
    """Tests for enumerate_range()."""

    def test_length_matches_count(self):
        day = date(1990, 5, 17)
        for gender, known in (("M", True), ("F", True), ("A", False)):
            entries = enumerate_range(day, day, gender)
            assert len(entries) == count_combinations(day, day, known)
            assert sum(1 for _ in entries) == len(entries)

    def test_female_order(self):
        entries = enumerate_range(date(1990, 5, 17), date(1990, 5, 17), "F")
        first = list(islice(entries, 6))
        assert first == [
            RangeEntry(1990, 5, 17, "0000"),
            RangeEntry(1990, 5, 17, "0002"),
            RangeEntry(1990, 5, 17, "0004"),
            RangeEntry(1990, 5, 17, "0006"),
            RangeEntry(1990, 5, 17, "0008"),
            RangeEntry(1990, 5, 17, "0010"),
        ]

    def test_male_digits(self):
        entries = enumerate_range(date(1990, 5, 17), date(1990, 5, 17), GenderFilter.MALE)
        serials = [e.serial for e in islice(entries, 5)]
        assert serials == ["0001", "0003", "0005", "0007", "0009"]

    def test_either_is_ascending(self):
        entries = list(enumerate_range(date(1990, 5, 17), date(1990, 5, 17), None))
        serials = [e.serial for e in entries]
        assert serials == [f"{i:04d}" for i in range(10000)]

    def test_date_major_order(self):
        entries = enumerate_range(date(1999, 12, 31), date(2000, 1, 1), "M")
        items = list(entries)
        assert len(items) == 10000
        assert items[0] == (1999, 12, 31, "0001")
        assert items[4999] == (1999, 12, 31, "9999")
        assert items[5000] == (2000, 1, 1, "0001")

    def test_restartable(self):
        entries = enumerate_range(date(1990, 5, 17), date(1990, 5, 17), "F")
        assert list(islice(entries, 3)) == list(islice(entries, 3))

    def test_reversed_range_is_empty(self):
        entries = enumerate_range(date(1990, 5, 18), date(1990, 5, 17), "A")
        assert len(entries) == 0
        assert list(entries) == []

    def test_year_out_of_range(self):
        with pytest.raises(InvalidInput):
            enumerate_range(date(1799, 12, 31), date(1800, 1, 1), "A")
        with pytest.raises(InvalidInput):
            enumerate_range(date(2299, 12, 31), date(2300, 1, 1), "A")


class TestGenderFilterParse:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("M", GenderFilter.MALE),
            ("m", GenderFilter.MALE),
            ("male", GenderFilter.MALE),
            ("F", GenderFilter.FEMALE),
            ("Female", GenderFilter.FEMALE),
            ("A", GenderFilter.EITHER),
            ("x", GenderFilter.EITHER),
            (None, GenderFilter.EITHER),
            (GenderFilter.FEMALE, GenderFilter.FEMALE),
        ],
    )
    def test_parse(self, value, expected):
        assert GenderFilter.parse(value) is expected


class TestGenerateIdentifiers:
    """Tests for generate_identifiers()."""

    def test_all_valid(self):
        identifiers = list(
            generate_identifiers(date(2010, 2, 28), date(2010, 2, 28), "F")
        )
        assert len(identifiers) == 5000
        assert len(set(identifiers)) == 5000
        for identifier in identifiers[:50]:
            assert validate(identifier)
            assert decode(identifier) == (2010, 2, 28)
            assert gender_of(identifier) == "F"

    def test_prefix_suffix(self):
        lines = generate_identifiers(
            date(1990, 5, 17), date(1990, 5, 17), "M", prefix="user_", suffix="!"
        )
        first = next(iter(lines))
        assert first.startswith("user_")
        assert first.endswith("!")
        assert len(first) == len("user_") + 11 + 1

    def test_errors_raised_eagerly(self):
        with pytest.raises(InvalidInput):
            generate_identifiers(date(1700, 1, 1), date(1700, 1, 2))


class TestRangeFacades:
    def test_combinatorics_counter(self):
        assert CombinatoricsCounter.count("1990-05-17", "1990-05-18", False) == 20000

    def test_range_generator(self):
        entries = RangeGenerator.enumerate("2000-01-01", "2000-01-01", "M")
        assert len(entries) == 5000
        first = next(iter(RangeGenerator.identifiers("2000-01-01", "2000-01-01", "M")))
        assert first.startswith("0021010001")
