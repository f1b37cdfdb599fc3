"""Tests for MPN normalization and shared string helpers."""

import pytest

from mpn_engine.normalize import (
    clean_token,
    first_digit_index,
    last_digit_index,
    leading_letters,
    levenshtein_distance,
    levenshtein_similarity,
    normalize,
    starts_with_any,
    trailing_letters,
)


class TestNormalize:
    """Tests for normalize function."""

    @pytest.mark.parametrize("input_val,expected", [
        ("bma456", "BMA456"),
        (" BMA456-FB ", "BMA456-FB"),
        ("cr0603-fx-1001elf", "CR0603-FX-1001ELF"),
        ("2n2222a", "2N2222A"),
        ("\tGBLC05C\n", "GBLC05C"),
    ])
    def test_uppercases_and_trims(self, input_val: str, expected: str):
        assert normalize(input_val) == expected

    @pytest.mark.parametrize("input_val", [None, "", "   "])
    def test_empty_input(self, input_val):
        assert normalize(input_val) == ""

    @pytest.mark.parametrize("input_val", ["bma456", " XAL4020-222meb ", "ß10k", "µ47"])
    def test_idempotent(self, input_val: str):
        once = normalize(input_val)
        assert normalize(once) == once

    def test_non_ascii_letters_untouched(self):
        """Only ASCII letters fold; 'ß'.upper() would change the length."""
        assert normalize("ßx") == "ßX"
        assert normalize("µh") == "µH"


class TestDigitScanning:
    """Tests for first_digit_index / last_digit_index."""

    @pytest.mark.parametrize("input_val,expected", [
        ("BMA456", 3),
        ("2N2222", 0),
        ("ABC", -1),
        ("", -1),
        (None, -1),
    ])
    def test_first_digit(self, input_val, expected: int):
        assert first_digit_index(input_val) == expected

    @pytest.mark.parametrize("input_val,expected", [
        ("NTD4808N", 6),
        ("BMA456", 5),
        ("ABC", -1),
        (None, -1),
    ])
    def test_last_digit(self, input_val, expected: int):
        assert last_digit_index(input_val) == expected


class TestLetterRuns:
    """Tests for leading_letters / trailing_letters / starts_with_any."""

    def test_leading_letters(self):
        assert leading_letters("BMA456") == "BMA"
        assert leading_letters("2N2222") == ""

    def test_trailing_letters(self):
        assert trailing_letters("NTD4808N") == "N"
        assert trailing_letters("XAL4020-222MEB") == "MEB"
        assert trailing_letters("BMA456") == ""

    def test_starts_with_any(self):
        assert starts_with_any("GBLC05C", ("TVS", "GBLC"))
        assert not starts_with_any("GBLC05C", ("TVS", "PSM"))
        assert not starts_with_any(None, ("TVS",))
        assert not starts_with_any("", ("",))


class TestLevenshtein:
    """Tests for edit distance helpers."""

    @pytest.mark.parametrize("a,b,expected", [
        ("", "", 0),
        ("ABC", "", 3),
        ("", "ABC", 3),
        ("KITTEN", "SITTING", 3),
        ("BMA456", "BMA456", 0),
        ("BMA456", "BMA400", 2),
    ])
    def test_distance(self, a: str, b: str, expected: int):
        assert levenshtein_distance(a, b) == expected
        assert levenshtein_distance(b, a) == expected

    def test_similarity_bounds(self):
        assert levenshtein_similarity("", "") == 1.0
        assert levenshtein_similarity("ABC", "ABC") == 1.0
        assert levenshtein_similarity("ABC", "XYZ") == 0.0
        assert levenshtein_similarity("BMA456", "BMA400") == pytest.approx(1 - 2 / 6)


class TestCleanToken:
    """Tests for clean_token (free-text decoration removal)."""

    @pytest.mark.parametrize("input_val,expected", [
        ("P/N:LM358D,", "LM358D"),
        ("IC-NE555P", "NE555P"),
        ("BAT54-SMD", "BAT54"),
        ("(BMA456)", "BMA456"),
        ("GBLC05C.", "GBLC05C"),
        ("mpn:bme280", "BME280"),
        ("", ""),
        (None, ""),
    ])
    def test_strips_decoration(self, input_val, expected: str):
        assert clean_token(input_val) == expected
