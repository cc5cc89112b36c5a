"""Tests for check-value arithmetic."""

from __future__ import annotations

from nhifield.validator.checksum import current_check_value, legacy_check_digit


class TestLegacyCheckDigit:
    def test_zzz000_gives_8(self):
        # 24*7 + 24*6 + 24*5 = 432; 432 % 11 = 3; 11 - 3 = 8
        assert legacy_check_digit("ZZZ0001") == 8

    def test_published_test_numbers(self):
        assert legacy_check_digit("ZZZ0016") == 6
        assert legacy_check_digit("ZZZ0024") == 4

    def test_check_digit_10_becomes_0(self):
        # 432 + 3*3 = 441; 441 % 11 = 1; 11 - 1 = 10 -> 0
        assert legacy_check_digit("ZZZ0300") == 0

    def test_zero_remainder_has_no_check_digit(self):
        # 432 + 2*4 = 440
        assert legacy_check_digit("ZZZ2000") is None


class TestCurrentCheckValue:
    def test_zzz00a(self):
        # 432 + 1*2 = 434; 434 % 24 = 2; 24 - 2 = 22 (X)
        assert current_check_value("ZZZ00AX") == 22

    def test_abc12d(self):
        # 7 + 12 + 15 + 4 + 6 + 8 = 52; 52 % 24 = 4; 24 - 4 = 20 (V)
        assert current_check_value("ABC12DV") == 20

    def test_zero_remainder_has_no_check_value(self):
        # 432 + 12*2 = 456 = 19 * 24
        assert current_check_value("ZZZ00MZ") is None
        assert current_check_value("ZZZ00ZZ") is None

    def test_deterministic(self):
        assert current_check_value("abc12dv") == current_check_value("ABC12DV")
