"""Run configuration and its validation."""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


class ConfigurationError(Exception):
    """Invalid configuration, reported before any traversal."""


def normalize_extensions(extensions: list[str]) -> list[str]:
    """Strip whitespace and a leading dot; drop empty entries, keep order."""
    normalized = []
    for ext in extensions:
        ext = ext.strip()
        if ext.startswith("."):
            ext = ext[1:]
        if ext:
            normalized.append(ext)
    return normalized


@dataclass
class ComparisonConfig:
    """Everything a comparison run needs to know."""
    path_a: Path
    path_b: Path
    size_depth: int = 2
    file_types: list[str] = field(default_factory=list)
    case_insensitive: bool = False
    exclude_patterns: list[str] = field(default_factory=list)
    differences_only: bool = False
    deep_scan_depth: Optional[int] = None
    output_dir: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    log_file: Optional[Path] = None
    verbose: bool = False
    open_report: bool = False
    prune_excluded_dirs: bool = False
    show_progress: bool = True

    def __post_init__(self):
        self.path_a = Path(self.path_a)
        self.path_b = Path(self.path_b)
        self.output_dir = Path(self.output_dir)
        if self.log_file is not None:
            self.log_file = Path(self.log_file)
        self.file_types = normalize_extensions(self.file_types)
        self.exclude_patterns = [p.strip() for p in self.exclude_patterns if p.strip()]

    @property
    def name_a(self) -> str:
        return self.path_a.resolve().name

    @property
    def name_b(self) -> str:
        return self.path_b.resolve().name

    def validate(self) -> None:
        """Raise ConfigurationError if the run cannot start."""
        for label, path in (("Source", self.path_a), ("Target", self.path_b)):
            if not path.exists():
                raise ConfigurationError(f"{label} path does not exist: {path}")
            if not path.is_dir():
                raise ConfigurationError(f"{label} path is not a directory: {path}")
        if self.size_depth < 1:
            raise ConfigurationError("Depth must be a positive integer")
        if self.deep_scan_depth is not None and self.deep_scan_depth < 1:
            raise ConfigurationError("Deep scan depth must be a positive integer")
        if not self.output_dir.is_dir():
            raise ConfigurationError(f"Output directory does not exist: {self.output_dir}")
        if self.log_file is not None and not self.log_file.parent.is_dir():
            raise ConfigurationError(f"Log file directory does not exist: {self.log_file.parent}")
