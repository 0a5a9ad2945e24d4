"""Skill extractor output: vocabulary skills found in a résumé."""

from pydantic import BaseModel, ConfigDict, Field


class ExtractionResult(BaseModel):
    """Skills and experience pulled from one résumé text.

    `skills` holds canonical forms, deduplicated, in vocabulary order.
    """
    model_config = ConfigDict(frozen=True)

    skills: list[str] = []
    experience_years: int = Field(default=0, ge=0)
