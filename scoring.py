"""
scoring.py
==========
Deterministic, side-effect-free point calculation for quiz answers.

Kept apart from any session or progress tracking so it can be unit-tested
independently and rebalanced by changing PointSystemConfig values in
config.py without touching caller code.

Public API summary:
    calculate_quiz_points(quiz_type, is_correct, ...)   → int
    get_bonus_points(bonus_type, multiplier=1)          → int
    get_penalty_points(penalty_type, user_level=...)    → int
    score_request(request)                              → int

None of these functions raise for unknown keys. Unrecognised quiz types,
levels, bonuses and penalties fall back to the defaults documented on
PointSystemConfig; the fallback is logged at DEBUG level under
``point_economy.scoring``.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from config import POINT_SYSTEM, PointSystemConfig
from models import ScoreRequest, UserLevel

logger = logging.getLogger("point_economy.scoring")

PERSONAL_VERSE_CAP = 5


def calculate_quiz_points(
    quiz_type:         str,
    is_correct:        bool,
    user_level:        str = UserLevel.BEGINNER.value,
    time_taken:        float = 0,
    is_perfect:        bool = False,
    progress:          Optional[Any] = None,
    is_personal_verse: bool = False,
    *,
    config:            PointSystemConfig = POINT_SYSTEM,
) -> int:
    """
    Compute the points earned (or lost) for one quiz answer.

    Steps, in order:
        1. base points for the quiz type × the level multiplier
        2. wrong answer → return the level's incorrect-answer penalty outright
        3. perfect session → × level perfect bonus, floored immediately
        4. timed levels only, when time_taken > 0:
               min ≤ time_taken < ideal → +speedBonus
               time_taken < min         → +tooFastAnswer (negative)
        5. personal-verse quiz → capped at 5
        6. floor

    The order matters: the perfect-bonus floor happens before the flat
    time adjustment, so reordering changes results for fractional
    multipliers.

    Args:
        quiz_type:         Quiz category; unknown types use 10 base points.
        is_correct:        Whether the answer was right.
        user_level:        Difficulty tier; unknown tiers score as Beginner.
        time_taken:        Seconds spent. 0 means the time was not measured.
        is_perfect:        True when every answer in the session was correct.
        progress:          The caller's progress snapshot. Accepted but unused.
        is_personal_verse: True for quizzes built from the user's own verses.
        config:            Point tables to score against.

    Returns:
        Signed integer score.

    Examples:
        >>> calculate_quiz_points("verse-scramble", True, "Intermediate", 10)
        28
        >>> calculate_quiz_points("fill-blank", True, "Beginner", 1)
        8
        >>> calculate_quiz_points("sword-drill-ultimate", True, "Elite", 1, True)
        182
    """
    if quiz_type not in config.base_quiz_points:
        logger.debug("Unknown quiz type %r, using default base points.", quiz_type)
    if user_level not in config.difficulty_multipliers:
        logger.debug("Unknown user level %r, scoring as Beginner.", user_level)

    base_points = config.base_points_for(quiz_type)
    level       = config.level_config_for(user_level)
    points      = base_points * level.multiplier

    # --- Wrong answer: no partial credit ---
    if not is_correct:
        return config.incorrect_penalty_for(user_level)

    # --- Perfect session ---
    if is_perfect and level.perfect_bonus:
        points = math.floor(points * level.perfect_bonus)

    # --- Answer time ---
    if level.time_bonus and time_taken > 0:
        threshold = config.time_threshold_for(quiz_type)
        if threshold.min <= time_taken < threshold.ideal:
            points += config.bonuses.get("speedBonus") or 0
        if time_taken < threshold.min:
            points += config.penalties.get("tooFastAnswer") or 0

    if is_personal_verse:
        points = min(PERSONAL_VERSE_CAP, points)

    return math.floor(points)


def get_bonus_points(
    bonus_type: str,
    multiplier: float = 1,
    *,
    config:     PointSystemConfig = POINT_SYSTEM,
) -> int:
    """
    Flat bonus for an action, scaled by ``multiplier`` and floored.

    ``multiplier`` is typically a count, e.g. streak days for
    ``dailyStreakMaintained``. Unknown bonus types are worth 0, and so is
    a non-finite multiplier (inf or NaN).
    """
    if bonus_type not in config.bonuses:
        logger.debug("Unknown bonus type %r, worth 0 points.", bonus_type)
    base_bonus = config.bonuses.get(bonus_type) or 0

    points = base_bonus * multiplier
    if isinstance(points, float) and not math.isfinite(points):
        logger.debug("Non-finite bonus multiplier %r for %r, worth 0 points.", multiplier, bonus_type)
        return 0
    return math.floor(points)


def get_penalty_points(
    penalty_type: str,
    user_level:   str = UserLevel.BEGINNER.value,
    *,
    config:       PointSystemConfig = POINT_SYSTEM,
) -> int:
    """
    Penalty for an action (zero or negative).

    ``incorrectAnswer`` scales by ``user_level`` (unknown levels: -10).
    Every other penalty is flat and ``user_level`` is ignored. Unknown
    penalty types cost 0.
    """
    if penalty_type == "incorrectAnswer":
        if user_level not in config.difficulty_multipliers:
            logger.debug("Unknown user level %r, using default wrong-answer penalty.", user_level)
        return config.incorrect_penalty_for(user_level)
    if penalty_type not in config.penalties:
        logger.debug("Unknown penalty type %r, costs 0 points.", penalty_type)
    return config.penalties.get(penalty_type) or 0


def score_request(
    request: ScoreRequest,
    *,
    config:  PointSystemConfig = POINT_SYSTEM,
) -> int:
    """Score a validated ScoreRequest. Same result as calculate_quiz_points."""
    return calculate_quiz_points(
        request.quiz_type,
        request.is_correct,
        user_level=request.user_level,
        time_taken=request.time_taken,
        is_perfect=request.is_perfect,
        progress=request.progress,
        is_personal_verse=request.is_personal_verse,
        config=config,
    )
