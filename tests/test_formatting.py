"""Tests for folder_compare.formatting module."""

from folder_compare.formatting import (
    bytes_to_gb,
    bytes_to_human,
    percent_diff,
    signed_bytes_to_human,
)


class TestBytesToHuman:
    """Tests for bytes_to_human function."""

    def test_zero(self):
        assert bytes_to_human(0) == "0B"

    def test_bytes_have_no_decimals(self):
        assert bytes_to_human(1023) == "1023B"

    def test_kilobytes(self):
        assert bytes_to_human(1024) == "1.00KB"
        assert bytes_to_human(1500) == "1.46KB"

    def test_megabytes(self):
        assert bytes_to_human(1048576) == "1.00MB"
        assert bytes_to_human(1073741823) == "1024.00MB"

    def test_gigabytes(self):
        assert bytes_to_human(1073741824) == "1.00GB"
        assert bytes_to_human(5 * 1024 ** 4) == "5120.00GB"


class TestSignedBytesToHuman:
    """Tests for signed_bytes_to_human function."""

    def test_negative_keeps_sign(self):
        assert signed_bytes_to_human(-1500) == "-1.46KB"

    def test_positive_unsigned(self):
        assert signed_bytes_to_human(1500) == "1.46KB"

    def test_zero_never_signed(self):
        assert signed_bytes_to_human(0) == "0B"


class TestBytesToGb:
    """Tests for bytes_to_gb function."""

    def test_three_decimals(self):
        assert bytes_to_gb(0) == "0.000"
        assert bytes_to_gb(1073741824) == "1.000"
        assert bytes_to_gb(1610612736) == "1.500"

    def test_small_values_round_to_zero(self):
        assert bytes_to_gb(3100) == "0.000"


class TestPercentDiff:
    """Tests for percent_diff function."""

    def test_both_zero(self):
        assert percent_diff(0, 0) == "0.00"

    def test_zero_base_is_undefined(self):
        assert percent_diff(0, 5) == "N/A"

    def test_increase(self):
        assert percent_diff(3, 5) == "66.67"

    def test_decrease(self):
        assert percent_diff(4, 1) == "-75.00"
        assert percent_diff(3, 0) == "-100.00"

    def test_equal(self):
        assert percent_diff(7, 7) == "0.00"
