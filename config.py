"""
config.py
=========
Central configuration for the quiz point economy.

Every base value, multiplier, time threshold, bonus, penalty, shop price and
difficulty tweak lives here so game balance can be adjusted without touching
the scoring logic.

The tables are exposed read-only: ``PointSystemConfig`` is a frozen dataclass
and each table is wrapped in ``types.MappingProxyType``, nested tables
included. Treat ``POINT_SYSTEM`` as a process-wide constant.

Usage:
    from config import POINT_SYSTEM, QUIZ_POINTS, PointSystemConfig
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from models import LevelConfig, QuizType, TimeThreshold, UserLevel


DEFAULT_BASE_POINTS = 10
DEFAULT_INCORRECT_PENALTY = -10
DEFAULT_THRESHOLD_KEY = "default"


def _freeze(value: Any) -> Any:
    """Recursively wrap dicts in read-only mapping proxies."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


# ---------------------------------------------------------------------------
# Default tables
# ---------------------------------------------------------------------------

def _base_quiz_points() -> Mapping[str, int]:
    return {
        QuizType.FILL_BLANK.value:           8,
        QuizType.MULTIPLE_CHOICE.value:      3,
        QuizType.REFERENCE_RECALL.value:     5,
        QuizType.VERSE_SCRAMBLE.value:       10,
        QuizType.BOOK_ORDER.value:           13,
        QuizType.SWORD_DRILL_ULTIMATE.value: 25,
        QuizType.VERSE_DETECTIVE.value:      15,
    }


def _difficulty_multipliers() -> Mapping[str, LevelConfig]:
    return {
        UserLevel.BEGINNER.value:     LevelConfig(multiplier=1.0, time_bonus=False, perfect_bonus=1.2),
        UserLevel.INTERMEDIATE.value: LevelConfig(multiplier=1.5, time_bonus=True,  perfect_bonus=1.5),
        UserLevel.ADVANCED.value:     LevelConfig(multiplier=2.0, time_bonus=True,  perfect_bonus=2.0),
        UserLevel.ELITE.value:        LevelConfig(multiplier=3.0, time_bonus=True,  perfect_bonus=2.5),
    }


def _bonuses() -> Mapping[str, int]:
    return {
        "verseOfDayChecked":     5,
        "dailyStreakMaintained": 3,    # per day in streak
        "firstQuizOfDay":        10,
        "perfectQuiz":           25,   # all answers correct in session
        "speedBonus":            13,
        "bonusTrivia":           15,   # per correct trivia answer
        "courseLesson":          50,
        "courseLevel":           250,
        "courseComplete":        750,
        "planMilestone":         100,
        "planComplete":          400,
        "achievement":           75,
    }


def _penalties() -> Mapping[str, Union[int, Mapping[str, int]]]:
    return {
        "incorrectAnswer": {
            UserLevel.BEGINNER.value:     -5,
            UserLevel.INTERMEDIATE.value: -10,
            UserLevel.ADVANCED.value:     -18,
            UserLevel.ELITE.value:        -25,
        },
        "streakBroken":    -25,
        "inactiveDay":     -5,    # per day inactive, max 7 days
        "quizFailed":      -10,
        "tooFastAnswer":   -5,    # likely guessing
        "repeatedMistake": -4,
    }


def _time_thresholds() -> Mapping[str, TimeThreshold]:
    return {
        QuizType.VERSE_SCRAMBLE.value:       TimeThreshold(min=3,  ideal=15, max=60),
        QuizType.BOOK_ORDER.value:           TimeThreshold(min=5,  ideal=20, max=90),
        QuizType.SWORD_DRILL_ULTIMATE.value: TimeThreshold(min=2,  ideal=10, max=45),
        QuizType.MULTIPLE_CHOICE.value:      TimeThreshold(min=2,  ideal=8,  max=30),
        QuizType.FILL_BLANK.value:           TimeThreshold(min=3,  ideal=12, max=45),
        QuizType.REFERENCE_RECALL.value:     TimeThreshold(min=2,  ideal=10, max=40),
        QuizType.VERSE_DETECTIVE.value:      TimeThreshold(min=15, ideal=30, max=120),
        DEFAULT_THRESHOLD_KEY:               TimeThreshold(min=2,  ideal=10, max=60),
    }


def _shop_items() -> Mapping[str, int]:
    return {
        "unlockApocrypha": 500,
        "customTheme":     250,
        "skipDifficulty":  150,
        "extraHint":       50,
        "streakFreeze":    100,   # protects the streak for one day
        "doublePoints":    200,   # 2x points for the next quiz
        "revealAnswer":    25,
    }


def _difficulty_tweaks() -> Mapping[str, Mapping[str, Any]]:
    return {
        UserLevel.BEGINNER.value: {
            "fillBlank":      {"blanks": 1, "wordPool": "easy"},
            "multipleChoice": {"options": 3, "similar": False},
            "timeLimit":      None,
        },
        UserLevel.INTERMEDIATE.value: {
            "fillBlank":      {"blanks": 2, "wordPool": "medium"},
            "multipleChoice": {"options": 4, "similar": True},
            "timeLimit":      120,
        },
        UserLevel.ADVANCED.value: {
            "fillBlank":      {"blanks": 3, "wordPool": "hard"},
            "multipleChoice": {"options": 4, "similar": True},
            "timeLimit":      90,
        },
        UserLevel.ELITE.value: {
            "fillBlank":      {"blanks": 4, "wordPool": "expert"},
            "multipleChoice": {"options": 5, "similar": True},
            "timeLimit":      60,
        },
    }


# Used when a replacement table leaves out its own fallback entry.
DEFAULT_LEVEL_CONFIG = _difficulty_multipliers()[UserLevel.BEGINNER.value]
DEFAULT_TIME_THRESHOLD = _time_thresholds()[DEFAULT_THRESHOLD_KEY]
DEFAULT_DIFFICULTY_TWEAKS: Mapping[str, Any] = _freeze(_difficulty_tweaks()[UserLevel.BEGINNER.value])


# ---------------------------------------------------------------------------
# Point system
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PointSystemConfig:
    """
    Static tables driving the scoring engine.

    Attributes:
        base_quiz_points:       Quiz type → base points before the level multiplier.
        difficulty_multipliers: User level → LevelConfig.
        bonuses:                Bonus name → flat points.
        penalties:              Penalty name → flat points, except
                                ``incorrectAnswer`` which maps level → points.
        time_thresholds:        Quiz type → TimeThreshold, plus a ``default`` entry.
        shop_items:             Item name → cost in points.
        difficulty_tweaks:      User level → quiz-generation parameters.
                                Not read by the scoring engine.

    Unknown keys never raise: every ``*_for`` accessor falls back to a
    documented default.
    """
    base_quiz_points:       Mapping[str, int]                          = field(default_factory=_base_quiz_points)
    difficulty_multipliers: Mapping[str, LevelConfig]                  = field(default_factory=_difficulty_multipliers)
    bonuses:                Mapping[str, int]                          = field(default_factory=_bonuses)
    penalties:              Mapping[str, Union[int, Mapping[str, int]]] = field(default_factory=_penalties)
    time_thresholds:        Mapping[str, TimeThreshold]                = field(default_factory=_time_thresholds)
    shop_items:             Mapping[str, int]                          = field(default_factory=_shop_items)
    difficulty_tweaks:      Mapping[str, Mapping[str, Any]]            = field(default_factory=_difficulty_tweaks)

    def __post_init__(self) -> None:
        # Every table, nested ones included, is stored as a read-only proxy.
        for name in (
            "base_quiz_points", "difficulty_multipliers", "bonuses", "penalties",
            "time_thresholds", "shop_items", "difficulty_tweaks",
        ):
            object.__setattr__(self, name, _freeze(getattr(self, name)))

    # ------------------------------------------------------------------
    # Lookups with fallbacks
    # ------------------------------------------------------------------

    def base_points_for(self, quiz_type: str) -> int:
        """Base points for ``quiz_type``, or 10 when the type is unknown."""
        return self.base_quiz_points.get(quiz_type) or DEFAULT_BASE_POINTS

    def level_config_for(self, user_level: str) -> LevelConfig:
        """LevelConfig for ``user_level``, or the Beginner entry when unknown."""
        level = self.difficulty_multipliers.get(user_level)
        if level is None:
            level = self.difficulty_multipliers.get(UserLevel.BEGINNER.value, DEFAULT_LEVEL_CONFIG)
        return level

    def incorrect_penalty_for(self, user_level: str) -> int:
        """Wrong-answer penalty for ``user_level``, or -10 when unknown."""
        by_level = self.penalties.get("incorrectAnswer")
        if not isinstance(by_level, Mapping):
            return DEFAULT_INCORRECT_PENALTY
        return by_level.get(user_level) or DEFAULT_INCORRECT_PENALTY

    def time_threshold_for(self, quiz_type: str) -> TimeThreshold:
        """TimeThreshold for ``quiz_type``, or the ``default`` entry when unknown."""
        threshold = self.time_thresholds.get(quiz_type)
        if threshold is None:
            threshold = self.time_thresholds.get(DEFAULT_THRESHOLD_KEY, DEFAULT_TIME_THRESHOLD)
        return threshold

    def shop_cost_for(self, item: str) -> Optional[int]:
        """Cost of a shop item, or None when the shop does not sell it."""
        return self.shop_items.get(item)

    def difficulty_tweaks_for(self, user_level: str) -> Mapping[str, Any]:
        """Quiz-generation tweaks for ``user_level``, or the Beginner entry when unknown."""
        tweaks = self.difficulty_tweaks.get(user_level)
        if tweaks is None:
            tweaks = self.difficulty_tweaks.get(UserLevel.BEGINNER.value, DEFAULT_DIFFICULTY_TWEAKS)
        return tweaks


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

POINT_SYSTEM = PointSystemConfig()

QUIZ_POINTS: Mapping[str, int] = POINT_SYSTEM.base_quiz_points
"""Legacy alias for the base-points table, kept for older callers."""
