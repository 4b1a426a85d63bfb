"""CSV output and report files."""

import csv
import os
import platform
import subprocess
from pathlib import Path
from typing import Iterable

REPORT_SUFFIXES = {
    "summary": "summary",
    "sizes": "sizes",
    "filetypes": "filetypes",
    "file_differences": "file_differences",
    "deep_scan": "deep_scan",
}


def summary_header(name_a: str, name_b: str) -> list[str]:
    return ["metric", name_a, name_b, "difference", "status"]


def size_header(name_a: str, name_b: str) -> list[str]:
    return [
        "relative_path",
        f"size_bytes_{name_a}", f"size_human_{name_a}",
        f"size_bytes_{name_b}", f"size_human_{name_b}",
        "difference_bytes", "difference_human", "percent_diff", "status",
    ]


def filetype_header(name_a: str, name_b: str) -> list[str]:
    return [
        "file_type", f"count_{name_a}", f"count_{name_b}",
        "total_combined", "difference", "percent_diff", "status",
    ]


def file_list_header() -> list[str]:
    return ["relative_path", "status", "location"]


def deep_scan_header(name_a: str, name_b: str) -> list[str]:
    return [
        "relative_path",
        f"size_gb_{name_a}", f"files_{name_a}",
        f"size_gb_{name_b}", f"files_{name_b}",
        "size_diff_gb", "files_diff", "status",
    ]


def report_paths(output_dir: Path, name_a: str, name_b: str, timestamp: str) -> dict[str, Path]:
    """Output file of every report kind for one run."""
    base_name = f"compare_{name_a}_vs_{name_b}_{timestamp}"
    return {
        kind: Path(output_dir) / f"{base_name}_{suffix}.csv"
        for kind, suffix in REPORT_SUFFIXES.items()
    }


def default_log_file(output_dir: Path, timestamp: str) -> Path:
    return Path(output_dir) / f"folder_compare_{timestamp}.log"


def write_csv(path: Path, header: list[str], records: Iterable) -> int:
    """
    Write a header and one row per record.

    Records provide to_row(). String fields are quoted, numbers are not.
    Returns the number of records written.
    """
    count = 0
    with open(path, "w", newline="", encoding="utf-8", errors="surrogateescape") as f:
        csv.writer(f).writerow(header)
        writer = csv.writer(f, quoting=csv.QUOTE_NONNUMERIC)
        for record in records:
            writer.writerow(record.to_row())
            count += 1
    return count


def open_file_in_viewer(file_path: str) -> None:
    """Open a file using the system default application."""
    system = platform.system()
    try:
        if system == "Windows":
            os.startfile(file_path)
        elif system == "Darwin":  # macOS
            subprocess.run(["open", file_path], check=True)
        else:  # Linux and others
            subprocess.run(["xdg-open", file_path], check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        print(f"Could not open file: {e}")
        print(f"Please manually open: {file_path}")
