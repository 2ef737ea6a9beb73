"""Unit tests for the CLI entry point."""

from pathlib import Path
from unittest.mock import patch

import pytest
from dux import __version__
from dux.cli.main import StartPathError, app, resolve_start_path
from dux.core.config import ExplorerSettings
from dux.core.paths import ROOT_PATH
from typer.testing import CliRunner

runner = CliRunner()


class TestResolveStartPath:
    """Tests for resolve_start_path."""

    def test_no_argument_is_root(self) -> None:
        """Without an argument browsing starts at the root."""
        assert resolve_start_path([]) == ROOT_PATH

    def test_directory_made_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Relative directories are resolved against the working directory."""
        (tmp_path / "sub").mkdir()
        monkeypatch.chdir(tmp_path)

        assert resolve_start_path(["sub"]) == str(tmp_path / "sub")

    def test_too_many_arguments(self, tmp_path: Path) -> None:
        """More than one argument is rejected."""
        with pytest.raises(StartPathError, match="invalid number of arguments, expected 0-1"):
            resolve_start_path([str(tmp_path), str(tmp_path)])

    def test_missing_path(self, tmp_path: Path) -> None:
        """A path that does not exist is rejected."""
        with pytest.raises(StartPathError, match="No such file"):
            resolve_start_path([str(tmp_path / "missing")])

    def test_file_rejected(self, tmp_path: Path) -> None:
        """A regular file is not a directory."""
        target = tmp_path / "file.txt"
        target.write_text("x")

        with pytest.raises(StartPathError, match="not a directory"):
            resolve_start_path([str(target)])

    def test_unreadable_directory(self, tmp_path: Path) -> None:
        """A directory without read access is rejected."""
        with patch("dux.cli.main.os.access", return_value=False):
            with pytest.raises(StartPathError, match="not readable"):
                resolve_start_path([str(tmp_path)])


class TestVersion:
    """Tests for --version."""

    @pytest.mark.parametrize("flag", ["--version", "-V"])
    def test_version(self, flag: str) -> None:
        """--version prints the version and exits 0."""
        result = runner.invoke(app, [flag])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestStartupErrors:
    """Tests for failures before the loop starts."""

    def test_file_argument_exits_1(self, tmp_path: Path) -> None:
        """A file start path prints an error and exits 1."""
        target = tmp_path / "file.txt"
        target.write_text("x")

        result = runner.invoke(app, [str(target)])

        assert result.exit_code == 1
        assert "Initializing..." in result.output
        assert "Cannot get start path" in result.output

    def test_two_arguments_exit_1(self, tmp_path: Path) -> None:
        """Two positional arguments exit 1."""
        result = runner.invoke(app, [str(tmp_path), str(tmp_path)])

        assert result.exit_code == 1
        assert "invalid number of arguments" in result.output

    def test_invalid_config_exits_1(self, tmp_path: Path) -> None:
        """A broken settings file exits 1."""
        config = tmp_path / "config.toml"
        config.write_text("name_width = 1\n")

        with patch("dux.cli.main.run_explorer") as mock_run:
            result = runner.invoke(app, [str(tmp_path), "--config", str(config)])

        assert result.exit_code == 1
        assert "Invalid settings" in result.output
        mock_run.assert_not_called()


class TestRunExplorer:
    """Tests for wiring settings into the explorer."""

    def test_settings_passed(self, tmp_path: Path) -> None:
        """Settings from the file reach the explorer."""
        config = tmp_path / "config.toml"
        config.write_text("hide_empty = false\n")

        with patch("dux.cli.main.run_explorer", return_value=0) as mock_run:
            result = runner.invoke(app, [str(tmp_path), "--config", str(config)])

        assert result.exit_code == 0
        start_path, settings = mock_run.call_args.args
        assert start_path == str(tmp_path)
        assert settings == ExplorerSettings(hide_empty=False)

    def test_workers_option_overrides(self, tmp_path: Path) -> None:
        """--workers caps the fan-out."""
        with patch("dux.cli.main.run_explorer", return_value=0) as mock_run:
            result = runner.invoke(
                app, [str(tmp_path), "-w", "4", "--config", str(tmp_path / "none.toml")]
            )

        assert result.exit_code == 0
        assert mock_run.call_args.args[1].max_workers == 4

    def test_workers_must_be_positive(self, tmp_path: Path) -> None:
        """--workers 0 is a usage error."""
        result = runner.invoke(app, [str(tmp_path), "--workers", "0"])
        assert result.exit_code == 2


class TestSession:
    """End-to-end sessions driven through stdin."""

    def test_quit_session(self, sample_tree: Path) -> None:
        """Listing a directory and typing 'q' exits 0 with a farewell."""
        result = runner.invoke(
            app,
            [str(sample_tree), "--config", str(sample_tree / "none.toml")],
            input="q\n",
        )

        assert result.exit_code == 0
        assert "Disk Usage Explorer" in result.output
        assert "[b]" in result.output
        assert "Bye! See ya!" in result.output

    def test_navigate_then_end_of_input(self, sample_tree: Path) -> None:
        """Entering a folder then closing stdin exits 0."""
        result = runner.invoke(
            app,
            [str(sample_tree), "--config", str(sample_tree / "none.toml")],
            input="1\n",
        )

        assert result.exit_code == 0
        assert str(sample_tree / "b") in result.output
        assert "Bye! See ya!" in result.output
