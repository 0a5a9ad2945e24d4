"""Job/candidate skill matching and ranking.

A job skill counts as matched when, case-insensitively, it is a substring of
some user skill or some user skill is a substring of it ("Pipe" vs
"Pipe Fitting"). Scores are clamped to 60-99; empty inputs score 0.
"""

import logging
import random
from collections.abc import Iterable, Sequence
from typing import Protocol

from rapidfuzz import fuzz

from models.schemas.match_result import MatchResult, RankedJob, SkillMatch

logger = logging.getLogger(__name__)

MIN_MATCH_PERCENTAGE = 60
MAX_MATCH_PERCENTAGE = 99

# Per-skill display confidence
MIN_MATCH_STRENGTH = 85
MATCH_STRENGTH_SPAN = 15

STRENGTH_MODES = ("random", "similarity")


class JobLike(Protocol):
    """Anything carrying a list of required skills."""
    skills: Sequence[str]


def _require_skill_list(name: str, value: object) -> None:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence of strings, not {type(value).__name__}")


def _contains_either_way(skill: str, others_lower: list[str]) -> bool:
    return any(other in skill or skill in other for other in others_lower)


def calculate_match_percentage(job_skills: Sequence[str], user_skills: Sequence[str]) -> int:
    """Percentage of job skills covered by the user's skills, clamped to 60-99.

    Returns 0 when either list is empty.
    """
    _require_skill_list("job_skills", job_skills)
    _require_skill_list("user_skills", user_skills)
    if not job_skills or not user_skills:
        return 0

    user_lower = [s.lower() for s in user_skills]
    matching = sum(1 for s in job_skills if _contains_either_way(s.lower(), user_lower))

    # Integer floor of matching / total * 100
    raw = matching * 100 // len(job_skills)
    return min(max(raw, MIN_MATCH_PERCENTAGE), MAX_MATCH_PERCENTAGE)


def find_matching_skills(job_skills: Sequence[str], user_skills: Sequence[str]) -> list[str]:
    """Job skills (original order and casing) matched by any user skill."""
    _require_skill_list("job_skills", job_skills)
    _require_skill_list("user_skills", user_skills)
    user_lower = [s.lower() for s in user_skills]
    return [s for s in job_skills if _contains_either_way(s.lower(), user_lower)]


def find_missing_skills(job_skills: Sequence[str], user_skills: Sequence[str]) -> list[str]:
    """Job skills not matched by any user skill, in order."""
    matching = set(find_matching_skills(job_skills, user_skills))
    return [s for s in job_skills if s not in matching]


def _similarity_strength(job_skill: str, user_lower: list[str]) -> int:
    """Deterministic strength from the best fuzzy ratio among containing user skills."""
    skill = job_skill.lower()
    candidates = [u for u in user_lower if u in skill or skill in u] or user_lower
    best = max((fuzz.ratio(skill, u) for u in candidates), default=0.0)
    return MIN_MATCH_STRENGTH + round(best * MATCH_STRENGTH_SPAN / 100)


def score_job(
    job_skills: Sequence[str],
    user_skills: Sequence[str],
    strength: str = "random",
    rng: random.Random | None = None,
) -> MatchResult:
    """Full match breakdown for one job.

    strength="random" draws each matched skill's strength from 85-99
    (pass a seeded rng for reproducible output); strength="similarity"
    derives it from rapidfuzz's ratio and is fully deterministic.
    """
    if strength not in STRENGTH_MODES:
        raise ValueError(f"Unknown match strength mode: {strength}")
    if rng is None:
        rng = random.Random()

    matching = find_matching_skills(job_skills, user_skills)
    user_lower = [s.lower() for s in user_skills]

    matching_skills = []
    for skill in matching:
        if strength == "similarity":
            value = _similarity_strength(skill, user_lower)
        else:
            value = MIN_MATCH_STRENGTH + rng.randrange(MATCH_STRENGTH_SPAN)
        matching_skills.append(SkillMatch(name=skill, match_strength=value))

    return MatchResult(
        match_percentage=calculate_match_percentage(job_skills, user_skills),
        matching_skills=matching_skills,
        missing_skills=find_missing_skills(job_skills, user_skills),
    )


def match_jobs_to_skills(
    jobs: Iterable[JobLike],
    user_skills: Sequence[str],
    strength: str = "random",
    rng: random.Random | None = None,
) -> list[RankedJob]:
    """Score every job against user_skills and rank by match percentage.

    The sort is stable: jobs with equal scores keep their input order.
    """
    _require_skill_list("user_skills", user_skills)
    if rng is None:
        rng = random.Random()

    ranked: list[RankedJob] = []
    for job in jobs:
        if not hasattr(job, "skills"):
            raise TypeError(f"job {job!r} has no 'skills' attribute")
        result = score_job(job.skills, user_skills, strength=strength, rng=rng)
        ranked.append(RankedJob(job=job, **result.model_dump()))

    ranked.sort(key=lambda r: r.match_percentage, reverse=True)
    logger.info("Ranked %d jobs against %d user skills", len(ranked), len(user_skills))
    return ranked
