"""Comparison run: build every enabled report and write it out."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import ComparisonConfig
from .exclusions import ALWAYS_EXCLUDE
from .reports import ReportAssembler
from .writer import (
    deep_scan_header,
    file_list_header,
    filetype_header,
    open_file_in_viewer,
    report_paths,
    size_header,
    summary_header,
    write_csv,
)

logger = logging.getLogger(__name__)


def _log_configuration(config: ComparisonConfig) -> None:
    logger.info("=" * 41)
    logger.info("Folder Comparison Tool")
    logger.info("=" * 41)
    logger.info(f"Path 1: {config.path_a}")
    logger.info(f"Path 2: {config.path_b}")
    logger.info(f"Depth: {config.size_depth}")
    logger.info(f"File types: {' '.join(config.file_types) or 'none'}")
    logger.info(f"Case insensitive: {config.case_insensitive}")
    logger.info(f"Deep scan: {config.deep_scan_depth is not None}")
    if config.deep_scan_depth is not None:
        logger.info(f"Deep scan depth: {config.deep_scan_depth}")
    logger.info(f"Always excluded: {' '.join(ALWAYS_EXCLUDE)}")
    if config.exclude_patterns:
        logger.info(f"User exclusions: {' '.join(config.exclude_patterns)}")
        if config.prune_excluded_dirs:
            logger.info("Excluded directories are pruned")
    logger.info(f"Output directory: {config.output_dir}")
    if config.log_file is not None:
        logger.info(f"Log file: {config.log_file}")
    logger.info("=" * 41)


def compare_folders(config: ComparisonConfig, timestamp: Optional[str] = None) -> dict[str, Path]:
    """
    Compare the two roots of config and write the CSV reports.

    The file type report is skipped when no file types are configured and
    the deep scan report when no deep scan depth is set.

    Returns the generated report files keyed by report kind.
    """
    timestamp = timestamp or datetime.now().strftime("%Y%m%d_%H%M%S")
    name_a, name_b = config.name_a, config.name_b
    paths = report_paths(config.output_dir, name_a, name_b, timestamp)
    generated = {}

    _log_configuration(config)
    assembler = ReportAssembler(config)

    logger.info("Generating summary report...")
    write_csv(paths["summary"], summary_header(name_a, name_b), assembler.summary())
    generated["summary"] = paths["summary"]
    logger.info(f"Summary report saved to: {paths['summary']}")

    logger.info(f"Generating size comparison (depth: {config.size_depth})...")
    write_csv(paths["sizes"], size_header(name_a, name_b), assembler.size_comparison())
    generated["sizes"] = paths["sizes"]
    logger.info(f"Size comparison saved to: {paths['sizes']}")

    if config.file_types:
        logger.info("Generating file type comparison...")
        write_csv(paths["filetypes"], filetype_header(name_a, name_b), assembler.file_type_comparison())
        generated["filetypes"] = paths["filetypes"]
        logger.info(f"File type comparison saved to: {paths['filetypes']}")
    else:
        logger.info("No file types specified, skipping file type comparison")

    logger.info("Generating file list comparison...")
    write_csv(paths["file_differences"], file_list_header(), assembler.file_list_difference())
    generated["file_differences"] = paths["file_differences"]
    logger.info(f"File list comparison saved to: {paths['file_differences']}")

    if config.deep_scan_depth is not None:
        logger.info(f"Generating deep scan report (depth: {config.deep_scan_depth})...")
        write_csv(paths["deep_scan"], deep_scan_header(name_a, name_b), assembler.deep_scan())
        generated["deep_scan"] = paths["deep_scan"]
        logger.info(f"Deep scan report saved to: {paths['deep_scan']}")

    scan_errors = assembler.scan_errors

    logger.info("=" * 41)
    logger.info("Comparison complete!")
    logger.info("Generated files:")
    for kind, path in generated.items():
        logger.info(f"  - {kind}: {path}")
    if scan_errors:
        logger.warning(f"{len(scan_errors)} entries could not be read and were skipped")
    logger.info("=" * 41)

    print("\n" + "=" * 60)
    print("COMPARISON COMPLETE!")
    print("=" * 60)
    print(f"Source: {config.path_a}")
    print(f"Target: {config.path_b}")
    print("Generated files:")
    for kind, path in generated.items():
        print(f"  - {kind}: {path}")
    if config.log_file is not None:
        print(f"  - log: {config.log_file}")

    if scan_errors:
        print(f"\n--- Scan Errors ({len(scan_errors)} entries skipped) ---")
        for folder_name, error in scan_errors[:10]:  # Show first 10
            print(f"  [{folder_name}] {error.relative_path}")
            print(f"    {error.error}")
        if len(scan_errors) > 10:
            print(f"  ... and {len(scan_errors) - 10} more errors")
        print("-" * 20)

    if config.open_report:
        logger.info("Opening summary file...")
        open_file_in_viewer(str(paths["summary"]))

    return generated
