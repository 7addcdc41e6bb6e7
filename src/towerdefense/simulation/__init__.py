"""Simulation subsystem -- path, combat, turn loop, level setup."""
from .combat import CombatSystem, ShotOutcome, ShotReport, fire_on
from .level import Level, TurnReport, Verdict
from .path import Path
from .random_source import FixedRandomSource, RandomSource, SeededRandomSource
from .scenario import DEFAULT_SETUP, LevelSetup, TowerPlacement, build_level
from .stats import LevelStats, TowerStatsRecord

__all__ = [
    "CombatSystem",
    "DEFAULT_SETUP",
    "FixedRandomSource",
    "Level",
    "LevelSetup",
    "LevelStats",
    "Path",
    "RandomSource",
    "SeededRandomSource",
    "ShotOutcome",
    "ShotReport",
    "TowerPlacement",
    "TowerStatsRecord",
    "TurnReport",
    "Verdict",
    "build_level",
    "fire_on",
]
