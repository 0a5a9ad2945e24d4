"""Pydantic contracts shared by the services and the API layer."""

from models.schemas.extraction_result import ExtractionResult
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchResult, RankedJob, SkillMatch
from models.schemas.suggestion import Suggestion

__all__ = [
    "ExtractionResult",
    "JobPosting",
    "MatchResult",
    "RankedJob",
    "SkillMatch",
    "Suggestion",
]
