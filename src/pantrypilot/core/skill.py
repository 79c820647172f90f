"""Skill fit between recipe difficulty and the cook's experience."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pantrypilot.core.models import Difficulty, SkillLevel

DIFFICULTY_SCORES = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}

SKILL_SCORES = {
    SkillLevel.BEGINNER: 1,
    SkillLevel.INTERMEDIATE: 2,
    SkillLevel.ADVANCED: 3,
    SkillLevel.EXPERT: 4,
}

FIT_BONUS = 0.1
OVERREACH_PENALTY = -0.2


def _ordinal(value: Union[Enum, str, None], scores: dict) -> Optional[int]:
    if value is None:
        return None
    raw = value.value if isinstance(value, Enum) else str(value)
    raw = raw.strip().lower()
    for member, score in scores.items():
        if member.value.lower() == raw:
            return score
    return None


class SkillFitScorer:
    """Additive adjustment: small bonus when within reach, penalty when two or more levels above."""

    def adjustment(
        self,
        difficulty: Union[Difficulty, str, None],
        skill_level: Union[SkillLevel, str, None],
    ) -> float:
        difficulty_score = _ordinal(difficulty, DIFFICULTY_SCORES)
        skill_score = _ordinal(skill_level, SKILL_SCORES)
        if difficulty_score is None or skill_score is None:
            return 0.0
        if difficulty_score <= skill_score:
            return FIT_BONUS
        if difficulty_score > skill_score + 1:
            return OVERREACH_PENALTY
        return 0.0
