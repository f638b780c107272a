"""TOML-backed reporting settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import tomllib

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = ROOT_DIR / "configs" / "reporting" / "default.toml"


@dataclass(frozen=True)
class ReportingSettings:
    """Tunables shared by the leaderboard, network and report builders."""

    leaderboard_default_limit: int = 50
    network_default_limit: int = 25
    network_max_limit: int = 100
    currency: str = "PLN"
    notable_sessions: int = 5
    recent_sessions_player: int = 5
    recent_sessions_admin: int = 10

    def as_config_json(self) -> dict[str, Any]:
        return {
            "leaderboard": {"default_limit": self.leaderboard_default_limit},
            "network": {
                "default_limit": self.network_default_limit,
                "max_limit": self.network_max_limit,
            },
            "format": {"currency": self.currency},
            "reports": {
                "notable_sessions": self.notable_sessions,
                "recent_sessions_player": self.recent_sessions_player,
                "recent_sessions_admin": self.recent_sessions_admin,
            },
        }


def load_reporting_settings(file_path: Path | None = None) -> ReportingSettings:
    """Load and validate reporting settings from one TOML file."""
    target = file_path or DEFAULT_CONFIG_PATH
    if not target.exists():
        raise FileNotFoundError(f"Config file not found: {target}")
    if not target.is_file():
        raise ValueError(f"Config path is not a file: {target}")

    with target.open("rb") as file:
        raw = tomllib.load(file)
    return _parse_reporting_settings(raw, target)


def _parse_reporting_settings(raw: dict[str, Any], file_path: Path) -> ReportingSettings:
    defaults = ReportingSettings()
    leaderboard_raw = raw.get("leaderboard", {})
    network_raw = raw.get("network", {})
    format_raw = raw.get("format", {})
    reports_raw = raw.get("reports", {})

    currency = str(format_raw.get("currency", defaults.currency)).strip()
    if not currency:
        raise ValueError(f"{file_path}: [format].currency must not be empty")

    settings = ReportingSettings(
        leaderboard_default_limit=int(
            leaderboard_raw.get("default_limit", defaults.leaderboard_default_limit)
        ),
        network_default_limit=int(network_raw.get("default_limit", defaults.network_default_limit)),
        network_max_limit=int(network_raw.get("max_limit", defaults.network_max_limit)),
        currency=currency,
        notable_sessions=int(reports_raw.get("notable_sessions", defaults.notable_sessions)),
        recent_sessions_player=int(
            reports_raw.get("recent_sessions_player", defaults.recent_sessions_player)
        ),
        recent_sessions_admin=int(
            reports_raw.get("recent_sessions_admin", defaults.recent_sessions_admin)
        ),
    )
    _validate_settings(file_path=file_path, settings=settings)
    return settings


def _validate_settings(*, file_path: Path, settings: ReportingSettings) -> None:
    if settings.leaderboard_default_limit <= 0:
        raise ValueError(f"{file_path}: [leaderboard].default_limit must be > 0")
    if settings.network_default_limit <= 0:
        raise ValueError(f"{file_path}: [network].default_limit must be > 0")
    if settings.network_max_limit < settings.network_default_limit:
        raise ValueError(f"{file_path}: [network].max_limit must be >= [network].default_limit")
    if settings.notable_sessions <= 0:
        raise ValueError(f"{file_path}: [reports].notable_sessions must be > 0")
    if settings.recent_sessions_player <= 0:
        raise ValueError(f"{file_path}: [reports].recent_sessions_player must be > 0")
    if settings.recent_sessions_admin <= 0:
        raise ValueError(f"{file_path}: [reports].recent_sessions_admin must be > 0")


__all__ = ["DEFAULT_CONFIG_PATH", "ReportingSettings", "load_reporting_settings"]
