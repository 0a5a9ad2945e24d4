from pydantic import BaseModel

from models.schemas.job_posting import JobPosting
from models.schemas.match_result import SkillMatch
from models.schemas.suggestion import Suggestion


class ExtractionResponse(BaseModel):
    skills: list[str] = []
    experience_years: int = 0


class ResumeUploadResponse(BaseModel):
    message: str = "Resume uploaded successfully"
    filename: str
    extracted_skills: list[str] = []
    experience_years: int = 0
    suggestions: list[Suggestion] = []


class JobMatchResponse(JobPosting):
    match_percentage: int = 0
    matching_skills: list[SkillMatch] = []
    missing_skills: list[str] = []
