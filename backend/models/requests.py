from pydantic import BaseModel, Field


class ExtractSkillsRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Plain text resume content")


class JobMatchRequest(BaseModel):
    skills: list[str] = Field(..., description="Candidate's current skills")
    search_term: str | None = Field(None, max_length=200)
    distance: float | None = Field(None, gt=0, description="Maximum distance in miles")
    filter_skills: list[str] | None = Field(None, description="Only jobs requiring one of these skills")


class SkillMatchRequest(BaseModel):
    job_skills: list[str]
    user_skills: list[str]
