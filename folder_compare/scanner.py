"""Folder scanning functionality."""

import fnmatch
import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from .exclusions import ExclusionMatcher
from .models import TreeNode, TreeTotals, TypeCount

ROOT = "."


class WalkMode(Enum):
    """Measurements a walk can produce."""
    DEPTH_AGGREGATE = "depth_aggregate"
    DIRECTORY_INDEX = "directory_index"
    FLAT_FILE_LIST = "flat_file_list"
    TYPE_COUNTS = "type_counts"


def _long_path(path: Path) -> str:
    """Convert path to long path format on Windows to handle paths > 260 chars."""
    path_str = str(path.absolute())
    if os.name == 'nt' and not path_str.startswith('\\\\?\\'):
        return '\\\\?\\' + path_str
    return path_str


class ScanError:
    """Record of an entry that could not be measured."""

    def __init__(self, relative_path: str, absolute_path: str, error: str):
        self.relative_path = relative_path
        self.absolute_path = absolute_path
        self.error = error

    def __repr__(self) -> str:
        return f"ScanError({self.relative_path!r}, {self.error!r})"


@dataclass
class TreeScan:
    """
    Result of one traversal of a root.

    files maps each measured file's relative path to its size in bytes;
    directories holds every non-excluded directory, the root included.
    """
    root: Path
    files: dict[str, int] = field(default_factory=dict)
    directories: set[str] = field(default_factory=lambda: {ROOT})
    errors: list[ScanError] = field(default_factory=list)


def depth_of(relative_path: str) -> int:
    """Nesting level of a relative path, the root being 0."""
    if relative_path == ROOT:
        return 0
    return relative_path.count("/") + 1


def parent_of(relative_path: str) -> str:
    head, _, _ = relative_path.rpartition("/")
    return head or ROOT


def ancestors_of(relative_path: str) -> list[str]:
    """Directories containing relative_path, ordered from the root down."""
    parts = relative_path.split("/")[:-1]
    return [ROOT] + ["/".join(parts[:i]) for i in range(1, len(parts) + 1)]


def _relative(root: Path, path: Path) -> str:
    try:
        rel = path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
    return ROOT if rel in ("", ".") else rel


def get_file_size(path: Path) -> Optional[int]:
    """Size of a regular file (symlinks followed), None for any other kind of entry."""
    st = os.stat(_long_path(path))
    if not stat.S_ISREG(st.st_mode):
        return None
    return st.st_size


def scan_tree(
    root: Path,
    matcher: Optional[ExclusionMatcher] = None,
    desc: str = "Scanning",
    prune_excluded: bool = False,
    show_progress: bool = True
) -> TreeScan:
    """
    Traverse root once and measure every non-excluded file.

    An excluded directory is left out of the directory set but is still
    descended, so files inside it that are not excluded themselves keep
    counting towards its ancestors. prune_excluded skips the whole subtree
    instead.

    Entries that cannot be read are recorded in TreeScan.errors and left
    out of every measurement; the walk carries on.
    """
    root = Path(root)
    matcher = matcher or ExclusionMatcher()
    scan = TreeScan(root=root)
    all_files = []

    def on_walk_error(err: OSError) -> None:
        abs_path = Path(err.filename) if err.filename else root
        scan.errors.append(ScanError(_relative(root, abs_path), str(abs_path), str(err)))

    # First, collect directories and file paths
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_walk_error):
        current = Path(dirpath)
        descend = []
        for dirname in dirnames:
            abs_dir = current / dirname
            if abs_dir.is_symlink():
                continue
            if matcher.is_excluded(dirname):
                if not prune_excluded:
                    descend.append(dirname)
                continue
            scan.directories.add(_relative(root, abs_dir))
            descend.append(dirname)
        dirnames[:] = descend

        for filename in filenames:
            if matcher.is_excluded(filename):
                continue
            all_files.append(_relative(root, current / filename))

    # Then measure with progress bar
    with tqdm(all_files, desc=desc, unit="file", disable=not show_progress) as pbar:
        for rel_path in pbar:
            abs_path = root / rel_path
            try:
                size = get_file_size(abs_path)
            except (OSError, IOError, PermissionError) as e:
                scan.errors.append(ScanError(rel_path, str(abs_path), str(e)))
                continue
            if size is not None:
                scan.files[rel_path] = size

    return scan


def directory_index(scan: TreeScan, depth: int) -> dict[str, TreeNode]:
    """
    One TreeNode per directory at depth 0..depth.

    aggregate_size is the recursive total whatever the depth bound, so
    content below the bound is folded into its nearest reported ancestor.
    immediate_file_count only counts files directly inside the directory.
    """
    selected = [d for d in scan.directories if depth_of(d) <= depth]
    sizes = dict.fromkeys(selected, 0)
    counts = dict.fromkeys(selected, 0)

    for rel_path, size in scan.files.items():
        parent = parent_of(rel_path)
        if parent in counts:
            counts[parent] += 1
        # ancestors_of()[i] sits at depth i
        for ancestor in ancestors_of(rel_path)[:depth + 1]:
            if ancestor in sizes:
                sizes[ancestor] += size

    return {
        path: TreeNode(path, depth_of(path), sizes[path], counts[path])
        for path in selected
    }


def depth_aggregate(scan: TreeScan, depth: int) -> dict[str, int]:
    """Aggregate size per directory at depth 0..depth."""
    return {path: node.aggregate_size for path, node in directory_index(scan, depth).items()}


def file_list(scan: TreeScan) -> list[str]:
    """Every measured file as ./<relative path>, in traversal order."""
    return [f"./{rel_path}" for rel_path in scan.files]


def count_file_types(
    scan: TreeScan,
    extensions: list[str],
    case_insensitive: bool = False
) -> list[TypeCount]:
    """Count files per extension, in the order the extensions were given."""
    names = [rel_path.rpartition("/")[2] for rel_path in scan.files]
    if case_insensitive:
        names = [name.lower() for name in names]

    counts = []
    for ext in extensions:
        pattern = f"*.{ext.lower() if case_insensitive else ext}"
        counts.append(TypeCount(ext, sum(1 for name in names if fnmatch.fnmatchcase(name, pattern))))
    return counts


def tree_totals(scan: TreeScan) -> TreeTotals:
    return TreeTotals(
        total_size=sum(scan.files.values()),
        total_files=len(scan.files),
        total_directories=len(scan.directories),
    )


def walk(
    root: Path,
    mode: WalkMode,
    depth: Optional[int] = None,
    extensions: Optional[list[str]] = None,
    case_insensitive: bool = False,
    matcher: Optional[ExclusionMatcher] = None,
    show_progress: bool = False
):
    """
    Traverse root and return (snapshot, errors) for a single measurement.

    Convenience wrapper around scan_tree for one-off use; ReportAssembler
    scans each root once and derives every measurement from that scan.

    depth is required by the per-directory modes, extensions by TYPE_COUNTS.
    """
    if mode in (WalkMode.DEPTH_AGGREGATE, WalkMode.DIRECTORY_INDEX) and depth is None:
        raise ValueError(f"{mode.value} needs a depth bound")

    scan = scan_tree(root, matcher, show_progress=show_progress)
    if mode is WalkMode.DEPTH_AGGREGATE:
        snapshot = depth_aggregate(scan, depth)
    elif mode is WalkMode.DIRECTORY_INDEX:
        snapshot = directory_index(scan, depth)
    elif mode is WalkMode.FLAT_FILE_LIST:
        snapshot = file_list(scan)
    else:
        snapshot = count_file_types(scan, extensions or [], case_insensitive)
    return snapshot, scan.errors
