"""Match scorer output: job/candidate skill fit."""

from typing import Any

from pydantic import BaseModel, Field


class SkillMatch(BaseModel):
    """A matched job skill with a 85-100 display confidence."""
    name: str
    match_strength: int = Field(ge=85, le=100)


class MatchResult(BaseModel):
    """Score and skill breakdown for one (job skills, user skills) pair.

    match_percentage is 0 when either list is empty, otherwise clamped to 60-99.
    """
    match_percentage: int = 0
    matching_skills: list[SkillMatch] = []
    missing_skills: list[str] = []


class RankedJob(MatchResult):
    """A caller-supplied job object with its match breakdown attached."""
    job: Any
