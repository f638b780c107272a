"""Tests for TOML-based reporting settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.config_base import DEFAULT_CONFIG_PATH, ReportingSettings, load_reporting_settings


def test_default_config_matches_dataclass_defaults() -> None:
    assert DEFAULT_CONFIG_PATH.is_file()
    assert load_reporting_settings() == ReportingSettings()


def test_load_reporting_settings_from_file(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.toml"
    config_path.write_text(
        """
[leaderboard]
default_limit = 10

[network]
default_limit = 5
max_limit = 20

[format]
currency = " EUR "

[reports]
notable_sessions = 3
recent_sessions_player = 4
recent_sessions_admin = 8
""".strip()
    )

    settings = load_reporting_settings(config_path)
    assert settings.leaderboard_default_limit == 10
    assert settings.network_default_limit == 5
    assert settings.network_max_limit == 20
    assert settings.currency == "EUR"
    assert settings.notable_sessions == 3
    assert settings.recent_sessions_player == 4
    assert settings.recent_sessions_admin == 8
    assert settings.as_config_json()["network"] == {"default_limit": 5, "max_limit": 20}


def test_missing_sections_fall_back_to_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "partial.toml"
    config_path.write_text("[format]\ncurrency = \"USD\"\n")

    settings = load_reporting_settings(config_path)
    assert settings.currency == "USD"
    assert settings.leaderboard_default_limit == ReportingSettings().leaderboard_default_limit


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("[leaderboard]\ndefault_limit = 0\n", r"\[leaderboard\]\.default_limit must be > 0"),
        ("[network]\ndefault_limit = -1\n", r"\[network\]\.default_limit must be > 0"),
        ("[network]\ndefault_limit = 30\nmax_limit = 10\n", r"\[network\]\.max_limit must be >="),
        ("[format]\ncurrency = \"  \"\n", r"\[format\]\.currency must not be empty"),
        ("[reports]\nnotable_sessions = 0\n", r"\[reports\]\.notable_sessions must be > 0"),
        ("[reports]\nrecent_sessions_admin = 0\n", r"\[reports\]\.recent_sessions_admin must be > 0"),
    ],
)
def test_invalid_settings_raise_value_error(tmp_path: Path, content: str, message: str) -> None:
    config_path = tmp_path / "invalid.toml"
    config_path.write_text(content)
    with pytest.raises(ValueError, match=message):
        load_reporting_settings(config_path)


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_reporting_settings(tmp_path / "missing.toml")


def test_directory_config_path_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="not a file"):
        load_reporting_settings(tmp_path)
