"""Player and system statistics."""

from domain.stats.calculator import PlayerStats, StatsCalculator, StreakClass, SystemStats

__all__ = ["PlayerStats", "StatsCalculator", "StreakClass", "SystemStats"]
