"""Job postings served from the static catalog."""

from pydantic import BaseModel


class JobPosting(BaseModel):
    id: int
    title: str
    company: str
    location: str
    distance_miles: float = 0.0
    employment_type: str = "Full-time"
    salary: str = ""
    description: str = ""
    skills: list[str] = []
