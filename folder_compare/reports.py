"""Report assembly: scan both roots, reconcile, classify."""

import logging
from typing import Optional

from .config import ComparisonConfig
from .exclusions import ExclusionMatcher
from .formatting import bytes_to_human, percent_diff, signed_bytes_to_human
from .models import (
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
from .reconcile import merge_diff, merge_join
from .scanner import (
    ScanError,
    TreeScan,
    count_file_types,
    depth_aggregate,
    directory_index,
    file_list,
    scan_tree,
    tree_totals,
)

logger = logging.getLogger(__name__)

TOTAL_LABEL = "--- TOTAL ---"


def classify_size(size_a: int, size_b: int, name_a: str, name_b: str) -> str:
    """Status of a directory size pair."""
    if size_a == size_b:
        return Status.IDENTICAL.value
    if size_a == 0:
        return only_in(name_b)
    if size_b == 0:
        return only_in(name_a)
    return larger_in(name_b) if size_b > size_a else larger_in(name_a)


def classify_type_count(count_a: int, count_b: int, name_a: str, name_b: str) -> str:
    """Status of a file type count pair."""
    if count_a == 0 and count_b == 0:
        return Status.NONE_FOUND.value
    if count_a == 0:
        return only_in(name_b)
    if count_b == 0:
        return only_in(name_a)
    if count_a == count_b:
        return Status.IDENTICAL.value
    return more_in(name_b) if count_b > count_a else more_in(name_a)


def classify_deep_scan(
    size_a: int,
    files_a: int,
    size_b: int,
    files_b: int,
    name_a: str,
    name_b: str
) -> str:
    """Status of a deep scan pair; size and file count must both match."""
    empty_a = size_a == 0 and files_a == 0
    empty_b = size_b == 0 and files_b == 0
    if empty_a and empty_b:
        return Status.BOTH_EMPTY.value
    if empty_a:
        return only_in(name_b)
    if empty_b:
        return only_in(name_a)
    if size_a == size_b and files_a == files_b:
        return Status.IDENTICAL.value
    return Status.DIFFERENT.value


def size_percent_diff(size_a: int, size_b: int) -> str:
    """Percentage of a size pair; undefined when exactly one side is empty."""
    if (size_a == 0) != (size_b == 0):
        return "N/A"
    return percent_diff(size_a, size_b)


def _same_or_different(value_a: int, value_b: int) -> str:
    return Status.IDENTICAL.value if value_a == value_b else Status.DIFFERENT.value


class ReportAssembler:
    """
    Build the five comparison reports for one configuration.

    Each root is traversed once, on first use, and every report derives
    its snapshots from that traversal. Nothing outlives the instance.
    """

    def __init__(self, config: ComparisonConfig):
        self.config = config
        self.name_a = config.name_a
        self.name_b = config.name_b
        self.matcher = ExclusionMatcher(config.exclude_patterns)
        self._scan_a: Optional[TreeScan] = None
        self._scan_b: Optional[TreeScan] = None

    def _scan(self, root, name: str) -> TreeScan:
        logger.debug(f"Analyzing {root}...")
        scan = scan_tree(
            root,
            self.matcher,
            desc=f"Scanning {name}",
            prune_excluded=self.config.prune_excluded_dirs,
            show_progress=self.config.show_progress,
        )
        for error in scan.errors:
            logger.warning(f"[{name}] Skipped {error.relative_path}: {error.error}")
        return scan

    @property
    def scan_a(self) -> TreeScan:
        if self._scan_a is None:
            self._scan_a = self._scan(self.config.path_a, self.name_a)
        return self._scan_a

    @property
    def scan_b(self) -> TreeScan:
        if self._scan_b is None:
            self._scan_b = self._scan(self.config.path_b, self.name_b)
        return self._scan_b

    @property
    def scan_errors(self) -> list[tuple[str, ScanError]]:
        """Entries skipped so far, tagged with the name of their root."""
        errors = []
        if self._scan_a is not None:
            errors.extend((self.name_a, e) for e in self._scan_a.errors)
        if self._scan_b is not None:
            errors.extend((self.name_b, e) for e in self._scan_b.errors)
        return errors

    def _keep(self, status: str) -> bool:
        return not (self.config.differences_only and status in EQUIVALENT_STATUSES)

    def summary(self) -> list[SummaryRecord]:
        """Whole-root totals; always the same four rows."""
        totals_a = tree_totals(self.scan_a)
        totals_b = tree_totals(self.scan_b)
        size_diff = totals_b.total_size - totals_a.total_size

        return [
            SummaryRecord(
                "total_size_bytes",
                totals_a.total_size,
                totals_b.total_size,
                size_diff,
                _same_or_different(totals_a.total_size, totals_b.total_size),
            ),
            SummaryRecord(
                "total_size_human",
                bytes_to_human(totals_a.total_size),
                bytes_to_human(totals_b.total_size),
                signed_bytes_to_human(size_diff),
                "",
            ),
            SummaryRecord(
                "total_files",
                totals_a.total_files,
                totals_b.total_files,
                totals_b.total_files - totals_a.total_files,
                _same_or_different(totals_a.total_files, totals_b.total_files),
            ),
            SummaryRecord(
                "total_directories",
                totals_a.total_directories,
                totals_b.total_directories,
                totals_b.total_directories - totals_a.total_directories,
                _same_or_different(totals_a.total_directories, totals_b.total_directories),
            ),
        ]

    def size_comparison(self) -> list[SizeRecord]:
        """Aggregate size of every directory down to the configured depth."""
        depth = self.config.size_depth
        sizes_a = depth_aggregate(self.scan_a, depth)
        sizes_b = depth_aggregate(self.scan_b, depth)

        records = []
        for row in merge_join(sizes_a, sizes_b, default=0):
            status = classify_size(row.value_a, row.value_b, self.name_a, self.name_b)
            if not self._keep(status):
                continue
            records.append(SizeRecord(
                relative_path=row.key,
                size_a=row.value_a,
                size_b=row.value_b,
                percent_diff=size_percent_diff(row.value_a, row.value_b),
                status=status,
            ))
        return records

    def file_type_comparison(self) -> list[TypeCountRecord]:
        """Per-extension counts followed by a TOTAL row over every extension."""
        extensions = self.config.file_types
        if not extensions:
            return []

        counts_a = count_file_types(self.scan_a, extensions, self.config.case_insensitive)
        counts_b = count_file_types(self.scan_b, extensions, self.config.case_insensitive)

        records = []
        total_a = total_b = 0
        for type_a, type_b in zip(counts_a, counts_b):
            logger.debug(f"Counted .{type_a.extension} files: {type_a.count} / {type_b.count}")
            total_a += type_a.count
            total_b += type_b.count
            status = classify_type_count(type_a.count, type_b.count, self.name_a, self.name_b)
            if not self._keep(status):
                continue
            records.append(TypeCountRecord(
                file_type=type_a.extension,
                count_a=type_a.count,
                count_b=type_b.count,
                percent_diff=percent_diff(type_a.count, type_b.count),
                status=status,
            ))

        records.append(TypeCountRecord(
            file_type=TOTAL_LABEL,
            count_a=total_a,
            count_b=total_b,
            percent_diff=percent_diff(total_a, total_b),
            status=Status.SUMMARY.value,
        ))
        logger.info(f"Total tracked files in {self.name_a}: {total_a}")
        logger.info(f"Total tracked files in {self.name_b}: {total_b}")
        return records

    def file_list_difference(self) -> list[FileListRecord]:
        """Files present on one side only: source rows first, then target rows."""
        diff = merge_diff(file_list(self.scan_a), file_list(self.scan_b))

        logger.info(f"Common files: {diff.common_count}")
        logger.info(f"Only in {self.name_a}: {len(diff.only_in_a)}")
        logger.info(f"Only in {self.name_b}: {len(diff.only_in_b)}")

        records = [
            FileListRecord(path, Status.ONLY_IN_SOURCE.value, self.name_a)
            for path in diff.only_in_a
        ]
        records.extend(
            FileListRecord(path, Status.ONLY_IN_TARGET.value, self.name_b)
            for path in diff.only_in_b
        )
        return records

    def deep_scan(self) -> list[DeepScanRecord]:
        """Size and immediate file count of every directory down to the deep scan depth."""
        depth = self.config.deep_scan_depth
        if depth is None:
            return []

        def metrics(scan: TreeScan) -> dict[str, tuple[int, int]]:
            return {
                path: (node.aggregate_size, node.immediate_file_count)
                for path, node in directory_index(scan, depth).items()
            }

        records = []
        for row in merge_join(metrics(self.scan_a), metrics(self.scan_b), default=(0, 0)):
            size_a, files_a = row.value_a
            size_b, files_b = row.value_b
            status = classify_deep_scan(size_a, files_a, size_b, files_b, self.name_a, self.name_b)
            if not self._keep(status):
                continue
            records.append(DeepScanRecord(row.key, size_a, files_a, size_b, files_b, status))
        return records
