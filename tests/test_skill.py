"""Tests for skill fit scoring."""

import pytest

from pantrypilot.core.models import Difficulty, SkillLevel
from pantrypilot.core.skill import SkillFitScorer


@pytest.mark.parametrize(
    "difficulty,skill,expected",
    [
        (Difficulty.EASY, SkillLevel.BEGINNER, 0.1),
        (Difficulty.MEDIUM, SkillLevel.BEGINNER, 0.0),
        (Difficulty.HARD, SkillLevel.BEGINNER, -0.2),
        (Difficulty.HARD, SkillLevel.INTERMEDIATE, 0.0),
        (Difficulty.HARD, SkillLevel.ADVANCED, 0.1),
        (Difficulty.HARD, SkillLevel.EXPERT, 0.1),
    ],
)
def test_adjustment_table(difficulty: Difficulty, skill: SkillLevel, expected: float) -> None:
    assert SkillFitScorer().adjustment(difficulty, skill) == expected


def test_accepts_case_insensitive_strings() -> None:
    scorer = SkillFitScorer()
    assert scorer.adjustment("hard", "beginner") == -0.2
    assert scorer.adjustment(" Easy ", "EXPERT") == 0.1


def test_unknown_values_have_no_effect() -> None:
    scorer = SkillFitScorer()
    assert scorer.adjustment("Impossible", SkillLevel.BEGINNER) == 0.0
    assert scorer.adjustment(Difficulty.HARD, "Wizard") == 0.0
    assert scorer.adjustment(None, None) == 0.0
