"""Command-line interface for folder compare."""

import argparse
import sys
from datetime import datetime
from pathlib import Path

from .comparer import compare_folders
from .config import ComparisonConfig, ConfigurationError
from .logs import configure_logging
from .writer import default_log_file


def comma_list(value: str) -> list[str]:
    """Split a comma-separated option value."""
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare two folders for size, structure, and file type distribution.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s /Volumes/Source/Project /Volumes/Backup/Project
  %(prog)s -d 3 -t mxf,mov,mp4 /path/to/folder1 /path/to/folder2
  %(prog)s -i -t MXF,mov -l comparison.log /path1 /path2
  %(prog)s --diff-only -v /path1 /path2
  %(prog)s --deep 5 -t mxf,mov /path1 /path2
  %(prog)s -x ".git,Thumbs.db,*.tmp" /path1 /path2

Note: .DS_Store is always excluded.
        """
    )

    parser.add_argument("path1", type=Path, help="Source folder")
    parser.add_argument("path2", type=Path, help="Target folder")

    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=2,
        help="Depth of subdirectory comparison (default: 2)"
    )
    parser.add_argument(
        "--types", "-t",
        type=comma_list,
        default=[],
        help="Comma-separated file types to count (e.g., mxf,mov,mp4)"
    )
    parser.add_argument(
        "--ignore-case", "-i",
        action="store_true",
        help="Case-insensitive file type matching"
    )
    parser.add_argument(
        "--log", "-l",
        type=Path,
        default=None,
        help="Log file path (default: <output-dir>/folder_compare_YYYYMMDD_HHMMSS.log)"
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=None,
        help="Output directory for CSV files (default: system temp directory)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--diff-only",
        action="store_true",
        help="Show only differences in output"
    )
    parser.add_argument(
        "--deep",
        type=int,
        default=None,
        metavar="DEPTH",
        help="Deep scan: list all subfolders to DEPTH with size and file count"
    )
    parser.add_argument(
        "--exclude", "-x",
        type=comma_list,
        default=[],
        help="Comma-separated basename patterns to exclude (e.g., .git,Thumbs.db,*.tmp)"
    )
    parser.add_argument(
        "--prune-excluded-dirs",
        action="store_true",
        help="Do not descend into directories matching an exclude pattern"
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Open the summary report when done"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide progress bars"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ComparisonConfig:
    """Turn parsed arguments into a ComparisonConfig."""
    config = ComparisonConfig(
        path_a=args.path1,
        path_b=args.path2,
        size_depth=args.depth,
        file_types=args.types,
        case_insensitive=args.ignore_case,
        exclude_patterns=args.exclude,
        differences_only=args.diff_only,
        deep_scan_depth=args.deep,
        log_file=args.log,
        verbose=args.verbose,
        open_report=args.open,
        prune_excluded_dirs=args.prune_excluded_dirs,
        show_progress=not args.no_progress,
    )
    if args.output_dir is not None:
        config.output_dir = args.output_dir
    return config


def main() -> None:
    """Main entry point."""
    args = parse_args()
    config = build_config(args)

    try:
        config.validate()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    if config.log_file is None:
        config.log_file = default_log_file(config.output_dir, timestamp)
    configure_logging(config.log_file, config.verbose)

    try:
        compare_folders(config, timestamp)
    except KeyboardInterrupt:
        print("\n\nInterrupted! Reports written so far are left in place.")
        print(f"Output directory: {config.output_dir}")
        sys.exit(1)
