"""
Test: Point system tables, read-only guarantees and lookup fallbacks.
"""
import dataclasses
from types import MappingProxyType

import pytest

from config import POINT_SYSTEM, QUIZ_POINTS, PointSystemConfig
from models import LevelConfig, QuizType, TimeThreshold, UserLevel


class TestTables:
    def test_every_quiz_type_has_points_and_threshold(self):
        for quiz_type in QuizType:
            assert quiz_type.value in POINT_SYSTEM.base_quiz_points
            assert quiz_type.value in POINT_SYSTEM.time_thresholds

    def test_every_level_is_configured(self):
        for level in UserLevel:
            assert level.value in POINT_SYSTEM.difficulty_multipliers
            assert level.value in POINT_SYSTEM.penalties["incorrectAnswer"]
            assert level.value in POINT_SYSTEM.difficulty_tweaks

    def test_level_config(self):
        assert POINT_SYSTEM.difficulty_multipliers["Elite"] == LevelConfig(
            multiplier=3.0, time_bonus=True, perfect_bonus=2.5,
        )
        assert POINT_SYSTEM.difficulty_multipliers["Beginner"].time_bonus is False

    def test_threshold_max_is_kept(self):
        assert POINT_SYSTEM.time_thresholds["verse-detective"] == TimeThreshold(15, 30, 120)
        assert POINT_SYSTEM.time_thresholds["default"].max == 60

    def test_legacy_alias(self):
        assert QUIZ_POINTS is POINT_SYSTEM.base_quiz_points
        assert QUIZ_POINTS["book-order"] == 13


class TestReadOnly:
    def test_attribute_assignment(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            POINT_SYSTEM.bonuses = {}

    def test_item_assignment(self):
        with pytest.raises(TypeError):
            POINT_SYSTEM.bonuses["perfectQuiz"] = 1000

    def test_nested_item_assignment(self):
        with pytest.raises(TypeError):
            POINT_SYSTEM.penalties["incorrectAnswer"]["Elite"] = 0
        with pytest.raises(TypeError):
            POINT_SYSTEM.difficulty_tweaks["Elite"]["fillBlank"]["blanks"] = 9

    def test_level_config_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            POINT_SYSTEM.difficulty_multipliers["Elite"].multiplier = 10.0

    def test_custom_tables_are_frozen_too(self):
        cfg = PointSystemConfig(shop_items={"goldenBookmark": 999})
        assert isinstance(cfg.shop_items, MappingProxyType)
        with pytest.raises(TypeError):
            cfg.shop_items["goldenBookmark"] = 1

    def test_custom_config_leaves_singleton_alone(self):
        PointSystemConfig(bonuses={"perfectQuiz": 1})
        assert POINT_SYSTEM.bonuses["perfectQuiz"] == 25


class TestLookups:
    def test_base_points_fallback(self):
        assert POINT_SYSTEM.base_points_for("verse-detective") == 15
        assert POINT_SYSTEM.base_points_for("mystery-quiz") == 10

    def test_level_config_fallback(self):
        assert POINT_SYSTEM.level_config_for("Grandmaster") is POINT_SYSTEM.level_config_for("Beginner")

    def test_incorrect_penalty_fallback(self):
        assert POINT_SYSTEM.incorrect_penalty_for("Intermediate") == -10
        assert POINT_SYSTEM.incorrect_penalty_for("Advanced") == -18
        assert POINT_SYSTEM.incorrect_penalty_for("") == -10

    def test_time_threshold_fallback(self):
        assert POINT_SYSTEM.time_threshold_for("fill-blank") == TimeThreshold(3, 12, 45)
        assert POINT_SYSTEM.time_threshold_for("mystery-quiz") == TimeThreshold(2, 10, 60)

    def test_shop_cost(self):
        assert POINT_SYSTEM.shop_cost_for("unlockApocrypha") == 500
        assert POINT_SYSTEM.shop_cost_for("revealAnswer") == 25
        assert POINT_SYSTEM.shop_cost_for("goldenBookmark") is None

    def test_difficulty_tweaks(self):
        elite = POINT_SYSTEM.difficulty_tweaks_for("Elite")
        assert elite["timeLimit"] == 60
        assert elite["multipleChoice"]["options"] == 5
        fallback = POINT_SYSTEM.difficulty_tweaks_for("Grandmaster")
        assert fallback["timeLimit"] is None
        assert fallback["fillBlank"]["wordPool"] == "easy"

    def test_enum_keys(self):
        assert POINT_SYSTEM.base_points_for(QuizType.SWORD_DRILL_ULTIMATE) == 25
        assert POINT_SYSTEM.level_config_for(UserLevel.ADVANCED).multiplier == 2.0

    def test_partial_tables_fall_back_to_builtin_defaults(self):
        cfg = PointSystemConfig(
            penalties={"streakBroken": -1},
            difficulty_multipliers={},
            time_thresholds={},
            difficulty_tweaks={},
        )
        assert cfg.incorrect_penalty_for("Elite") == -10
        assert cfg.level_config_for("Elite") == LevelConfig(1.0, False, 1.2)
        assert cfg.time_threshold_for("fill-blank") == TimeThreshold(2, 10, 60)
        assert cfg.difficulty_tweaks_for("Elite")["fillBlank"]["wordPool"] == "easy"

    def test_flat_incorrect_answer_penalty_falls_back(self):
        cfg = PointSystemConfig(penalties={"incorrectAnswer": -3})
        assert cfg.incorrect_penalty_for("Elite") == -10
