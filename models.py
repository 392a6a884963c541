"""
models.py
=========
Shared data models for the quiz point economy.

Contains:
  - QuizType      : Enumerated quiz-type keys recognised by the point tables.
  - UserLevel     : Enumerated difficulty tiers.
  - LevelConfig   : Frozen per-level multiplier record.
  - TimeThreshold : Frozen {min, ideal, max} timing record (seconds).
  - ScoreRequest  : Pydantic schema bundling the inputs of one scoring call.

Keeping these in one module gives config.py and scoring.py a single source
of truth for the shapes they exchange.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerated keys
# ---------------------------------------------------------------------------

class QuizType(str, Enum):
    """
    Quiz categories with their own base points and time thresholds.

    Members are ``str`` subclasses, so ``QuizType.FILL_BLANK`` and the plain
    string ``"fill-blank"`` hit the same table entry. Any other string is
    still accepted by the scoring functions and takes the fallback path.
    """

    FILL_BLANK           = "fill-blank"
    MULTIPLE_CHOICE      = "multiple-choice"
    REFERENCE_RECALL     = "reference-recall"
    VERSE_SCRAMBLE       = "verse-scramble"
    BOOK_ORDER           = "book-order"
    SWORD_DRILL_ULTIMATE = "sword-drill-ultimate"
    VERSE_DETECTIVE      = "verse-detective"


class UserLevel(str, Enum):
    """Difficulty tiers controlling multipliers and time-bonus eligibility."""

    BEGINNER     = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED     = "Advanced"
    ELITE        = "Elite"


# ---------------------------------------------------------------------------
# Configuration records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LevelConfig:
    """
    Scoring parameters for one user level.

    Attributes:
        multiplier:    Factor applied to the quiz type's base points.
        time_bonus:    Whether speed bonuses / too-fast penalties apply.
        perfect_bonus: Factor applied when the whole session was correct.
                       0 disables the perfect bonus for the level.
    """
    multiplier:    float
    time_bonus:    bool
    perfect_bonus: float


@dataclass(frozen=True)
class TimeThreshold:
    """
    Answer-time bands for one quiz type, in seconds.

    Below ``min`` the answer is treated as a guess; between ``min`` and
    ``ideal`` it earns the speed bonus. ``max`` is carried for quiz UIs and
    is not read by the scoring engine.
    """
    min:   float
    ideal: float
    max:   float


# ---------------------------------------------------------------------------
# Pydantic request schema
# ---------------------------------------------------------------------------

class ScoreRequest(BaseModel):
    """
    Validated inputs for a single quiz-answer scoring call.

    Callers that receive answer events from an untrusted edge (a form post,
    a queued job) can build one of these and hand it to
    ``scoring.score_request``. Construction raises
    ``pydantic.ValidationError`` for malformed values; the scoring engine
    itself never raises.

    Fields:
        quiz_type:         Any string; unknown types score with default base points.
        is_correct:        Whether the answer was right.
        user_level:        Any string; unknown levels score as Beginner.
        time_taken:        Seconds spent answering. 0 means not measured.
        is_perfect:        True when every answer in the session was correct.
        progress:          Opaque progress snapshot. Accepted, never inspected.
        is_personal_verse: True for quizzes built from the user's own verse bank.
    """

    quiz_type:         str
    is_correct:        bool
    user_level:        str = UserLevel.BEGINNER.value
    time_taken:        float = Field(default=0, ge=0)
    is_perfect:        bool = False
    progress:          Optional[Any] = None
    is_personal_verse: bool = False
