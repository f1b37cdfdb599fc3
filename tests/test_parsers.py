"""Tests for the value-code parsers module."""

import pytest

from mpn_engine.parsers import (
    format_inductance,
    format_resistance,
    parse_capacitance_code,
    parse_eia_code,
    parse_inductance_code,
    parse_r_notation,
    parse_resistance_code,
    values_match,
)


class TestParseEiaCode:
    """Tests for parse_eia_code function."""

    @pytest.mark.parametrize("input_val,expected", [
        ("103", 10000),
        ("472", 4700),
        ("100", 10),
        ("1001", 1000),
        ("4702", 47000),
        ("1000", 100),
    ])
    def test_significant_digits_and_multiplier(self, input_val: str, expected: float):
        result = parse_eia_code(input_val)
        assert result == pytest.approx(expected), f"{input_val} should parse to {expected}"

    @pytest.mark.parametrize("input_val", ["", None, "10", "10000", "4R7", "ABC"])
    def test_invalid(self, input_val):
        assert parse_eia_code(input_val) is None


class TestParseRNotation:
    """Tests for parse_r_notation function."""

    @pytest.mark.parametrize("input_val,expected", [
        ("4R7", 4.7),
        ("R47", 0.47),
        ("0R010", 0.01),
        ("10R", 10),
        ("4r7", 4.7),
    ])
    def test_decimal_marker(self, input_val: str, expected: float):
        assert parse_r_notation(input_val) == pytest.approx(expected)

    @pytest.mark.parametrize("input_val", ["", None, "R", "4K7", "47"])
    def test_invalid(self, input_val):
        assert parse_r_notation(input_val) is None


class TestParseResistanceCode:
    """Tests for parse_resistance_code function."""

    @pytest.mark.parametrize("input_val,expected", [
        # EIA
        ("1001", 1000),
        ("103", 10000),
        # R-notation
        ("4R7", 4.7),
        ("0R010", 0.01),
        # Multiplier notation
        ("4K7", 4700),
        ("10K", 10000),
        ("10K0", 10000),
        ("1M5", 1500000),
        ("4k7", 4700),
    ])
    def test_notations(self, input_val: str, expected: float):
        result = parse_resistance_code(input_val)
        assert result == pytest.approx(expected), f"{input_val} should parse to {expected}"

    @pytest.mark.parametrize("input_val", ["", None, "ELF", "K"])
    def test_invalid(self, input_val):
        assert parse_resistance_code(input_val) is None


class TestParseCapacitanceCode:
    """Tests for parse_capacitance_code function."""

    @pytest.mark.parametrize("input_val,expected", [
        ("104", 100e-9),
        ("105", 1e-6),
        ("101", 100e-12),
        ("1R0", 1e-12),
        ("4R7", 4.7e-12),
    ])
    def test_pf_codes(self, input_val: str, expected: float):
        assert parse_capacitance_code(input_val) == pytest.approx(expected)

    @pytest.mark.parametrize("input_val", ["", None, "1000", "10"])
    def test_invalid(self, input_val):
        assert parse_capacitance_code(input_val) is None


class TestParseInductanceCode:
    """Tests for parse_inductance_code function."""

    @pytest.mark.parametrize("code,unit,expected", [
        ("222", "nH", 2.2e-6),
        ("820", "nH", 82e-9),
        ("100", "uH", 10e-6),
        ("4R7", "uH", 4.7e-6),
        ("R47", "nH", 0.47e-6),
        ("4R7", "nH", 4.7e-6),
    ])
    def test_codes(self, code: str, unit: str, expected: float):
        assert parse_inductance_code(code, unit) == pytest.approx(expected)

    def test_default_unit_is_microhenry(self):
        assert parse_inductance_code("100") == pytest.approx(10e-6)

    def test_unknown_unit(self):
        assert parse_inductance_code("222", "mH") is None

    @pytest.mark.parametrize("input_val", ["", None, "2222", "MEB"])
    def test_invalid(self, input_val):
        assert parse_inductance_code(input_val, "nH") is None


class TestFormatters:
    """Tests for display formatters."""

    @pytest.mark.parametrize("ohms,expected", [
        (1000, "1k"),
        (4700, "4.7k"),
        (47000, "47k"),
        (1_000_000, "1M"),
        (47, "47"),
        (0.01, "0.01"),
        (None, ""),
    ])
    def test_format_resistance(self, ohms, expected: str):
        assert format_resistance(ohms) == expected

    @pytest.mark.parametrize("henries,expected", [
        (2.2e-6, "2.2uH"),
        (10e-6, "10.0uH"),
        (4.7e-7, "470nH"),
        (82e-9, "82nH"),
        (1e-3, "1.0mH"),
        (None, ""),
    ])
    def test_format_inductance(self, henries, expected: str):
        assert format_inductance(henries) == expected


class TestValuesMatch:
    """Tests for values_match."""

    def test_within_tolerance(self):
        assert values_match(1000, 1010)
        assert values_match(2.2e-6, 2.2e-6)

    def test_outside_tolerance(self):
        assert not values_match(1000, 1100)

    def test_missing_or_zero(self):
        assert not values_match(None, 1.0)
        assert not values_match(1.0, None)
        assert values_match(0, 0)
        assert not values_match(0, 1)
