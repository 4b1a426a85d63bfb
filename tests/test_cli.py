"""Tests for folder_compare.cli module."""

import logging
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from folder_compare.cli import build_config, comma_list, main, parse_args
from folder_compare.logs import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestCommaList:
    """Tests for comma_list function."""

    def test_split(self):
        assert comma_list("mxf,mov, mp4") == ["mxf", "mov", "mp4"]

    def test_empty_items_dropped(self):
        assert comma_list(",mov,,") == ["mov"]


class TestParseArgs:
    """Tests for parse_args function."""

    def test_parse_basic_args(self):
        with patch.object(sys, "argv", ["prog", "folder1", "folder2"]):
            args = parse_args()

        assert args.path1 == Path("folder1")
        assert args.path2 == Path("folder2")
        assert args.depth == 2
        assert args.types == []
        assert args.exclude == []
        assert args.deep is None
        assert args.log is None
        assert args.output_dir is None
        assert args.ignore_case is False
        assert args.diff_only is False
        assert args.verbose is False

    def test_parse_short_flags(self):
        args = parse_args([
            "-d", "3", "-t", "mxf,mov", "-i", "-l", "run.log", "-o", "out",
            "-v", "-x", ".git,*.tmp", "f1", "f2",
        ])

        assert args.depth == 3
        assert args.types == ["mxf", "mov"]
        assert args.ignore_case is True
        assert args.log == Path("run.log")
        assert args.output_dir == Path("out")
        assert args.verbose is True
        assert args.exclude == [".git", "*.tmp"]

    def test_parse_long_flags(self):
        args = parse_args([
            "--diff-only", "--deep", "5", "--prune-excluded-dirs", "--open", "--no-progress", "f1", "f2",
        ])

        assert args.diff_only is True
        assert args.deep == 5
        assert args.prune_excluded_dirs is True
        assert args.open is True
        assert args.no_progress is True

    def test_non_integer_depth_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["-d", "two", "f1", "f2"])


class TestBuildConfig:
    """Tests for build_config function."""

    def test_build_config(self, temp_dir):
        args = parse_args(["-t", ".mov,mxf", "--deep", "4", "-o", str(temp_dir), "--no-progress", "a", "b"])

        config = build_config(args)

        assert config.path_a == Path("a")
        assert config.file_types == ["mov", "mxf"]
        assert config.deep_scan_depth == 4
        assert config.output_dir == temp_dir
        assert config.show_progress is False

    def test_default_output_dir_kept(self):
        config = build_config(parse_args(["a", "b"]))
        assert config.output_dir.is_dir()


class TestMain:
    """Tests for main function."""

    def test_main_success(self, sample_folders, temp_dir):
        source, target = sample_folders
        output = temp_dir / "out"
        output.mkdir()

        with patch.object(
            sys, "argv",
            ["prog", "-t", "mov", "--deep", "2", "-o", str(output), "--no-progress", str(source), str(target)]
        ):
            main()

        assert len(list(output.glob("compare_source_vs_target_*_summary.csv"))) == 1
        assert len(list(output.glob("compare_source_vs_target_*_deep_scan.csv"))) == 1
        assert len(list(output.glob("folder_compare_*.log"))) == 1

    def test_main_custom_log(self, sample_folders, temp_dir):
        source, target = sample_folders
        log_file = temp_dir / "custom.log"

        with patch.object(
            sys, "argv",
            ["prog", "-l", str(log_file), "-o", str(temp_dir), "--no-progress", str(source), str(target)]
        ):
            main()

        assert "Comparison complete!" in log_file.read_text()

    def test_main_missing_source(self, sample_folders, temp_dir, capsys):
        _, target = sample_folders

        with patch.object(sys, "argv", ["prog", str(temp_dir / "nonexistent"), str(target)]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "Error: Source path does not exist" in capsys.readouterr().err

    def test_main_invalid_depth(self, sample_folders, capsys):
        source, target = sample_folders

        with patch.object(sys, "argv", ["prog", "-d", "0", str(source), str(target)]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "Depth must be a positive integer" in capsys.readouterr().err

    def test_main_keyboard_interrupt(self, sample_folders, temp_dir, capsys):
        source, target = sample_folders

        with patch.object(sys, "argv", ["prog", "-o", str(temp_dir), str(source), str(target)]):
            with patch("folder_compare.cli.compare_folders", side_effect=KeyboardInterrupt):
                with pytest.raises(SystemExit) as exc_info:
                    main()

        assert exc_info.value.code == 1
        assert "Interrupted!" in capsys.readouterr().out
