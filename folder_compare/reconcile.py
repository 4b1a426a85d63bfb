"""
Sorted-merge reconciliation of two snapshots.

Both algorithms sort their inputs themselves before merging, so callers
may pass keys in traversal order. Keys are ordered by their filesystem
bytes (os.fsencode), so names that are not valid UTF-8 sort where their
raw bytes would.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping


@dataclass
class JoinedRow:
    """One key of a full outer join with a value from each side."""
    key: str
    value_a: Any
    value_b: Any


@dataclass
class MergeDiffResult:
    """Keys found on one side only, plus the number of keys both sides share."""
    only_in_a: list[str] = field(default_factory=list)
    only_in_b: list[str] = field(default_factory=list)
    common_count: int = 0

    @property
    def total_keys(self) -> int:
        return len(self.only_in_a) + len(self.only_in_b) + self.common_count


def byte_key(key: str) -> bytes:
    """Sort key giving byte-wise order of a relative path."""
    return os.fsencode(key)


def merge_join(
    left: Mapping[str, Any],
    right: Mapping[str, Any],
    default: Any = 0
) -> Iterator[JoinedRow]:
    """
    Full outer join of two keyed snapshots in one linear pass.

    Yields exactly one row per distinct key, in ascending byte order. A key
    missing on one side gets ``default`` for that side.
    """
    left_items = sorted((byte_key(k), k, v) for k, v in left.items())
    right_items = sorted((byte_key(k), k, v) for k, v in right.items())
    i = j = 0

    while i < len(left_items) and j < len(right_items):
        left_bytes, left_key, left_value = left_items[i]
        right_bytes, right_key, right_value = right_items[j]
        if left_bytes == right_bytes:
            yield JoinedRow(left_key, left_value, right_value)
            i += 1
            j += 1
        elif left_bytes < right_bytes:
            yield JoinedRow(left_key, left_value, default)
            i += 1
        else:
            yield JoinedRow(right_key, default, right_value)
            j += 1

    for _, left_key, left_value in left_items[i:]:
        yield JoinedRow(left_key, left_value, default)
    for _, right_key, right_value in right_items[j:]:
        yield JoinedRow(right_key, default, right_value)


def merge_diff(left: Iterable[str], right: Iterable[str]) -> MergeDiffResult:
    """
    Compare two key sets, keeping only the keys that are not on both sides.

    Duplicates are collapsed. Shared keys are counted, not listed.
    """
    left_keys = sorted(set(left), key=byte_key)
    right_keys = sorted(set(right), key=byte_key)
    result = MergeDiffResult()
    i = j = 0

    while i < len(left_keys) and j < len(right_keys):
        left_bytes = byte_key(left_keys[i])
        right_bytes = byte_key(right_keys[j])
        if left_bytes == right_bytes:
            result.common_count += 1
            i += 1
            j += 1
        elif left_bytes < right_bytes:
            result.only_in_a.append(left_keys[i])
            i += 1
        else:
            result.only_in_b.append(right_keys[j])
            j += 1

    result.only_in_a.extend(left_keys[i:])
    result.only_in_b.extend(right_keys[j:])
    return result
