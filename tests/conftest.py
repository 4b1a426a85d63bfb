"""Shared test fixtures."""

import tempfile
from pathlib import Path

import pytest

from folder_compare.config import ComparisonConfig


def write_file(path: Path, size: int) -> Path:
    """Create path (and its parents) holding size bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_folders(temp_dir):
    """Create a source tree and an incomplete, slightly different copy of it."""
    source = temp_dir / "source"
    target = temp_dir / "target"
    source.mkdir()
    target.mkdir()

    # Identical in both
    write_file(source / "common.txt", 100)
    write_file(target / "common.txt", 100)
    write_file(source / "media" / "a.MOV", 1000)
    write_file(target / "media" / "a.MOV", 1000)
    write_file(source / "media" / "deep" / "x" / "y.mov", 300)
    write_file(target / "media" / "deep" / "x" / "y.mov", 300)

    # Different size
    write_file(source / "media" / "b.mov", 200)
    write_file(target / "media" / "b.mov", 250)

    # Present on one side only
    write_file(source / "clip1.mov", 1500)
    write_file(target / "clip2.mov", 1500)

    # Always excluded
    write_file(source / ".DS_Store", 4096)

    # Empty directory in target only
    (target / "empty").mkdir()

    return source, target


@pytest.fixture
def sample_config(sample_folders, temp_dir):
    """Configuration comparing the sample folders, writing into temp_dir/out."""
    source, target = sample_folders
    output = temp_dir / "out"
    output.mkdir()
    return ComparisonConfig(
        path_a=source,
        path_b=target,
        size_depth=2,
        file_types=["mov", "mxf"],
        output_dir=output,
        show_progress=False,
    )
