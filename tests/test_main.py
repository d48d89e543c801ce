"""Tests for command line parsing."""

from pathlib import Path

import pytest

from soundsnacks import __version__
from soundsnacks.__main__ import parse_args


class TestParseArgs:
    """Test parse_args."""

    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.data_dir is None
        assert args.debug is False

    def test_data_dir_and_debug(self, tmp_path: Path) -> None:
        args = parse_args(["--data-dir", str(tmp_path), "--debug"])
        assert args.data_dir == tmp_path
        assert args.debug is True

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            parse_args(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_option(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--host", "x"])
