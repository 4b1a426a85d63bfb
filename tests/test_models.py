"""Tests for folder_compare.models module."""

from decimal import Decimal

from folder_compare.models import (
    EQUIVALENT_STATUSES,
    DeepScanRecord,
    FileListRecord,
    SizeRecord,
    Status,
    SummaryRecord,
    TypeCountRecord,
    larger_in,
    more_in,
    only_in,
)


class TestStatus:
    """Tests for status tokens."""

    def test_fixed_tokens(self):
        assert Status.IDENTICAL.value == "IDENTICAL"
        assert Status.BOTH_EMPTY.value == "BOTH_EMPTY"
        assert Status.ONLY_IN_SOURCE.value == "ONLY_IN_SOURCE"
        assert Status.ONLY_IN_TARGET.value == "ONLY_IN_TARGET"

    def test_named_tokens(self):
        assert only_in("Backup") == "ONLY_IN_Backup"
        assert larger_in("Backup") == "LARGER_IN_Backup"
        assert more_in("Backup") == "MORE_IN_Backup"

    def test_equivalent_statuses(self):
        assert EQUIVALENT_STATUSES == {"IDENTICAL", "BOTH_EMPTY"}


class TestSizeRecord:
    """Tests for SizeRecord dataclass."""

    def test_difference_is_target_minus_source(self):
        record = SizeRecord("media", 2048, 1024, "-50.00", "LARGER_IN_A")
        assert record.difference == -1024

    def test_to_row(self):
        record = SizeRecord("media", 2048, 1024, "-50.00", "LARGER_IN_A")
        assert record.to_row() == [
            "media", 2048, "2.00KB", 1024, "1.00KB", -1024, "-1.00KB", Decimal("-50.00"), "LARGER_IN_A"
        ]


class TestTypeCountRecord:
    """Tests for TypeCountRecord dataclass."""

    def test_derived_columns(self):
        record = TypeCountRecord("mov", 3, 5, "66.67", "MORE_IN_B")
        assert record.total_combined == 8
        assert record.difference == 2

    def test_not_applicable_percent_stays_text(self):
        record = TypeCountRecord("mov", 0, 5, "N/A", "ONLY_IN_B")
        assert record.to_row()[5] == "N/A"


class TestDeepScanRecord:
    """Tests for DeepScanRecord dataclass."""

    def test_gigabyte_columns(self):
        record = DeepScanRecord("media", 1073741824, 3, 1610612736, 4, "DIFFERENT")
        assert record.size_gb_a == "1.000"
        assert record.size_gb_b == "1.500"
        assert record.size_diff_gb == Decimal("0.500")
        assert record.files_diff == 1

    def test_to_row(self):
        record = DeepScanRecord("media", 1610612736, 2, 0, 0, "ONLY_IN_A")
        assert record.to_row() == [
            "media", Decimal("1.500"), 2, Decimal("0.000"), 0, Decimal("-1.500"), -2, "ONLY_IN_A"
        ]


class TestOtherRecords:
    """Tests for SummaryRecord and FileListRecord."""

    def test_summary_row(self):
        record = SummaryRecord("total_files", 5, 6, 1, "DIFFERENT")
        assert record.to_row() == ["total_files", 5, 6, 1, "DIFFERENT"]

    def test_file_list_row(self):
        record = FileListRecord("./clip1.mov", "ONLY_IN_SOURCE", "Source")
        assert record.to_row() == ["./clip1.mov", "ONLY_IN_SOURCE", "Source"]
