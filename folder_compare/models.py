"""Data models for folder compare."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from .formatting import bytes_to_gb, bytes_to_human, signed_bytes_to_human


class Status(Enum):
    """Fixed status tokens for reconciled records."""
    IDENTICAL = "IDENTICAL"
    DIFFERENT = "DIFFERENT"
    BOTH_EMPTY = "BOTH_EMPTY"
    NONE_FOUND = "NONE_FOUND"
    SUMMARY = "SUMMARY"
    ONLY_IN_SOURCE = "ONLY_IN_SOURCE"
    ONLY_IN_TARGET = "ONLY_IN_TARGET"


# Statuses dropped when only differences are requested
EQUIVALENT_STATUSES = frozenset({Status.IDENTICAL.value, Status.BOTH_EMPTY.value})


def only_in(name: str) -> str:
    return f"ONLY_IN_{name}"


def larger_in(name: str) -> str:
    return f"LARGER_IN_{name}"


def more_in(name: str) -> str:
    return f"MORE_IN_{name}"


def _numeric(text: str) -> Union[Decimal, str]:
    """Carry a formatted number as Decimal so the CSV writer leaves it unquoted."""
    if text == "N/A":
        return text
    return Decimal(text)


@dataclass(frozen=True)
class TreeNode:
    """Metrics for one directory of a tree."""
    relative_path: str
    depth: int
    aggregate_size: int
    immediate_file_count: int


@dataclass(frozen=True)
class TypeCount:
    """Number of files under a root with a given extension."""
    extension: str
    count: int


@dataclass(frozen=True)
class TreeTotals:
    """Whole-root aggregates used by the summary report."""
    total_size: int
    total_files: int
    total_directories: int


@dataclass
class SummaryRecord:
    """One row of the summary report."""
    metric: str
    value_a: Union[int, str]
    value_b: Union[int, str]
    difference: Union[int, str]
    status: str

    def to_row(self) -> list:
        return [self.metric, self.value_a, self.value_b, self.difference, self.status]


@dataclass
class SizeRecord:
    """Aggregate size of one directory on both sides."""
    relative_path: str
    size_a: int
    size_b: int
    percent_diff: str
    status: str

    @property
    def difference(self) -> int:
        return self.size_b - self.size_a

    def to_row(self) -> list:
        return [
            self.relative_path,
            self.size_a,
            bytes_to_human(self.size_a),
            self.size_b,
            bytes_to_human(self.size_b),
            self.difference,
            signed_bytes_to_human(self.difference),
            _numeric(self.percent_diff),
            self.status,
        ]


@dataclass
class TypeCountRecord:
    """File count of one extension on both sides."""
    file_type: str
    count_a: int
    count_b: int
    percent_diff: str
    status: str

    @property
    def total_combined(self) -> int:
        return self.count_a + self.count_b

    @property
    def difference(self) -> int:
        return self.count_b - self.count_a

    def to_row(self) -> list:
        return [
            self.file_type,
            self.count_a,
            self.count_b,
            self.total_combined,
            self.difference,
            _numeric(self.percent_diff),
            self.status,
        ]


@dataclass
class FileListRecord:
    """A file present on one side only."""
    relative_path: str
    status: str
    location: str

    def to_row(self) -> list:
        return [self.relative_path, self.status, self.location]


@dataclass
class DeepScanRecord:
    """Size and immediate file count of one directory on both sides."""
    relative_path: str
    size_a: int
    files_a: int
    size_b: int
    files_b: int
    status: str

    @property
    def size_gb_a(self) -> str:
        return bytes_to_gb(self.size_a)

    @property
    def size_gb_b(self) -> str:
        return bytes_to_gb(self.size_b)

    @property
    def size_diff_gb(self) -> Decimal:
        # Difference of the rounded values, so the columns add up
        return Decimal(self.size_gb_b) - Decimal(self.size_gb_a)

    @property
    def files_diff(self) -> int:
        return self.files_b - self.files_a

    def to_row(self) -> list:
        return [
            self.relative_path,
            Decimal(self.size_gb_a),
            self.files_a,
            Decimal(self.size_gb_b),
            self.files_b,
            self.size_diff_gb,
            self.files_diff,
            self.status,
        ]
