"""Unit tests for explorer settings."""

from pathlib import Path
from unittest.mock import patch

import pytest
from dux.core.config import ConfigError, ExplorerSettings, load_settings
from pydantic import ValidationError


class TestExplorerSettings:
    """Tests for the settings model."""

    def test_defaults(self) -> None:
        """Defaults match the classic explorer behaviour."""
        settings = ExplorerSettings()

        assert settings.max_workers is None
        assert settings.hide_empty is True
        assert settings.name_width == 64
        assert settings.fallback_delay_seconds == 5.0
        assert settings.error_pause_seconds == 3.0
        assert settings.farewell_pause_seconds == 0.1

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("max_workers", 0),
            ("name_width", 15),
            ("name_width", 257),
            ("fallback_delay_seconds", -1),
            ("farewell_pause_seconds", 10),
        ],
    )
    def test_out_of_range_rejected(self, field: str, value: int) -> None:
        """Constraints are enforced."""
        with pytest.raises(ValidationError):
            ExplorerSettings.model_validate({field: value})

    def test_unknown_field_rejected(self) -> None:
        """Unknown keys are errors, not silently ignored."""
        with pytest.raises(ValidationError):
            ExplorerSettings.model_validate({"colour": "blue"})


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing file is not an error."""
        assert load_settings(tmp_path / "config.toml") == ExplorerSettings()

    def test_default_path_used(self, tmp_path: Path) -> None:
        """Without an argument the XDG config path is read."""
        config = tmp_path / "config.toml"
        config.write_text("max_workers = 3\n")

        with patch("dux.core.config.get_config_path", return_value=config):
            settings = load_settings()

        assert settings.max_workers == 3

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values from the file override defaults."""
        config = tmp_path / "config.toml"
        config.write_text("hide_empty = false\nname_width = 40\nerror_pause_seconds = 0\n")

        settings = load_settings(config)

        assert settings.hide_empty is False
        assert settings.name_width == 40
        assert settings.error_pause_seconds == 0
        assert settings.max_workers is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML raises ConfigError."""
        config = tmp_path / "config.toml"
        config.write_text("max_workers = [")

        with pytest.raises(ConfigError, match="Invalid TOML syntax"):
            load_settings(config)

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        config = tmp_path / "config.toml"
        config.write_text('name_width = "wide"\n')

        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(config)

    def test_unreadable_file(self, tmp_path: Path) -> None:
        """Read failures raise ConfigError."""
        config = tmp_path / "config.toml"
        config.write_text("")

        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigError, match="Failed to read settings"):
                load_settings(config)
