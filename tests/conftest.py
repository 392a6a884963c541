"""
Shared test fixtures for the point economy tests.
Pure functions over static tables: no network, no files, no mocks.
"""
import pytest

from config import PointSystemConfig
from models import LevelConfig


@pytest.fixture
def custom_config():
    """A rebalanced point system with its own quiz type and a 'Master' tier
    whose perfect bonus is disabled."""
    return PointSystemConfig(
        base_quiz_points={"flash-card": 4},
        difficulty_multipliers={
            "Beginner": LevelConfig(multiplier=1.0, time_bonus=False, perfect_bonus=1.2),
            "Master":   LevelConfig(multiplier=4.0, time_bonus=True, perfect_bonus=0),
        },
    )
