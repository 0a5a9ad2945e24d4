"""Tests for keyword skill extraction."""

import pytest
from pydantic import ValidationError

from models.schemas.extraction_result import ExtractionResult
from services.skill_extractor import (
    SKILL_VOCABULARY,
    canonicalize_skill,
    extract_experience_years,
    extract_skills,
    vocabulary_skills,
)


def test_extract_skills_plumbing_and_electrical():
    result = extract_skills("5 years of experience in plumbing and electrical work")
    assert set(result.skills) == {"Plumbing", "Electrical"}
    assert result.experience_years == 5


def test_extract_skills_is_case_insensitive():
    result = extract_skills("Certified in HVAC and DRYWALL installs")
    assert "Hvac" in result.skills
    assert "Drywall" in result.skills


def test_extract_skills_overlapping_terms_both_match():
    result = extract_skills("Comfortable with power tools")
    assert "Tools" in result.skills
    assert "Power tools" in result.skills


def test_extract_skills_deduplicates_repeated_mentions():
    result = extract_skills("Plumbing, more plumbing, and PLUMBING again")
    assert result.skills.count("Plumbing") == 1


def test_extract_skills_follows_vocabulary_order():
    result = extract_skills("electrical then plumbing then carpentry")
    assert result.skills == ["Carpentry", "Plumbing", "Electrical"]


def test_extract_skills_mock_resume():
    text = (
        "Mock resume with skills including carpentry, plumbing, electrical, "
        "painting, drywall, and 5 years of experience in home renovation."
    )
    result = extract_skills(text)
    assert {"Carpentry", "Plumbing", "Electrical", "Painting", "Drywall", "Renovation"} <= set(result.skills)
    assert result.experience_years == 5


def test_extract_skills_no_matches():
    result = extract_skills("Hello world")
    assert result.skills == []
    assert result.experience_years == 0


def test_extract_skills_empty_text():
    assert extract_skills("") == ExtractionResult()


def test_extract_skills_is_deterministic():
    text = "12 yrs experience: roofing, gutters, siding and tiling"
    assert extract_skills(text) == extract_skills(text)


def test_extract_skills_rejects_non_string():
    with pytest.raises(TypeError):
        extract_skills(None)


@pytest.mark.parametrize("term", SKILL_VOCABULARY)
def test_every_vocabulary_term_is_detected(term):
    result = extract_skills(f"Background: {term.upper()} on residential jobs")
    assert canonicalize_skill(term) in result.skills


def test_extraction_result_is_frozen():
    result = extract_skills("plumbing")
    with pytest.raises(ValidationError):
        result.experience_years = 3


# --- Experience years ---


@pytest.mark.parametrize("text,expected", [
    ("5 years of experience", 5),
    ("10+ yrs experience in remodeling", 10),
    ("3 year experience", 3),
    ("12yrs of experience", 12),
    ("7 YEARS OF EXPERIENCE", 7),
    ("1 yr experience", 1),
])
def test_extract_experience_years(text, expected):
    assert extract_experience_years(text) == expected


def test_extract_experience_years_first_mention_wins():
    assert extract_experience_years("2 years experience as helper, 8 years experience overall") == 2


def test_extract_experience_years_requires_experience_word():
    assert extract_experience_years("worked 5 years in plumbing") == 0


def test_extract_experience_years_requires_digits():
    assert extract_experience_years("many years of experience") == 0


def test_extract_experience_years_ignores_non_ascii_digits():
    assert extract_experience_years("\uff15 years of experience") == 0


# --- Vocabulary ---


def test_vocabulary_terms_are_lowercase_and_unique():
    assert len(SKILL_VOCABULARY) == len(set(SKILL_VOCABULARY))
    assert all(term and term == term.lower() for term in SKILL_VOCABULARY)


def test_canonicalize_skill_capitalizes_first_letter_only():
    assert canonicalize_skill("pipe fitting") == "Pipe fitting"
    assert canonicalize_skill("hvac") == "Hvac"


def test_vocabulary_skills_are_canonical():
    skills = vocabulary_skills()
    assert len(skills) == len(SKILL_VOCABULARY)
    assert skills[0] == "Carpentry"
    assert "Customer service" in skills
