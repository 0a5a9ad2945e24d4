"""Résumé optimisation hints shown after upload."""

from typing import Literal

from pydantic import BaseModel


class Suggestion(BaseModel):
    title: str
    description: str
    type: Literal["warning", "success"] = "warning"
