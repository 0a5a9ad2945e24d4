"""Keyword-based skill extraction for trades résumés.

Scans lowercased résumé text for every term of a fixed handyman vocabulary
(plain substring containment, no tokenisation) and pulls a single
"N years of experience" claim out of the text.
"""

import logging
import re

from models.schemas.extraction_result import ExtractionResult

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Handyman / construction vocabulary, grouped by trade.
# Order is the output order of extract_skills().
# ---------------------------------------------------------------------------
SKILL_VOCABULARY: tuple[str, ...] = (
    # Carpentry
    "carpentry", "woodworking", "framing", "cabinetry", "flooring",
    # Plumbing
    "plumbing", "pipe fitting", "drainage", "faucet", "toilet",
    # Electrical
    "electrical", "wiring", "lighting", "outlets", "circuits",
    # Drywall
    "drywall", "plastering", "mudding", "taping", "texturing",
    # Painting & finishing
    "painting", "staining", "finishing", "varnishing", "wallpaper",
    # Tiling
    "tiling", "ceramic", "porcelain", "grout", "backsplash",
    # Roofing & exterior
    "roofing", "shingles", "gutters", "siding", "fascia",
    # Outdoor
    "landscaping", "irrigation", "fencing", "decking", "paving",
    # HVAC
    "hvac", "furnace", "air conditioning", "ventilation", "ductwork",
    # Masonry
    "masonry", "concrete", "brick", "stone", "mortar",
    # Insulation & sealing
    "insulation", "weatherproofing", "sealing", "caulking", "foam",
    # General construction
    "renovation", "remodeling", "restoration", "construction", "repair",
    # Tools
    "tools", "power tools", "hand tools", "measurement", "level",
    # Planning
    "blueprint", "schematics", "plans", "design", "layout",
    # Demolition
    "demolition", "removal", "disposal", "cleanup", "waste management",
    # Safety
    "safety", "osha", "ppe", "harness", "protocols",
    # Customer-facing
    "customer service", "communication", "estimates", "quotes", "billing",
    # Project management
    "project management", "scheduling", "budgeting", "sourcing", "ordering",
)

if len(set(SKILL_VOCABULARY)) != len(SKILL_VOCABULARY):
    raise ValueError("SKILL_VOCABULARY contains duplicate terms")
if any(not term or term != term.lower() for term in SKILL_VOCABULARY):
    raise ValueError("SKILL_VOCABULARY terms must be non-empty and lowercase")

# "5 years of experience", "10+ yrs experience", "3 year experience"
EXPERIENCE_RE = re.compile(
    r"([0-9]+)[\s+]*(?:year|yr|years|yrs)[\s+]*(?:of)?[\s+]*experience",
    re.IGNORECASE,
)


def canonicalize_skill(term: str) -> str:
    """Display form of a vocabulary term: first character upper-cased."""
    return term[:1].upper() + term[1:]


def vocabulary_skills() -> list[str]:
    """All vocabulary terms in canonical form."""
    return [canonicalize_skill(term) for term in SKILL_VOCABULARY]


def extract_experience_years(text: str) -> int:
    """Return the year count of the first "N years of experience" mention, else 0."""
    match = EXPERIENCE_RE.search(text)
    if match is None:
        return 0
    return int(match.group(1))


def extract_skills(text: str) -> ExtractionResult:
    """Extract vocabulary skills and an experience estimate from résumé text.

    Every term is tested independently as a substring of the lowercased text,
    so overlapping terms ("tools" and "power tools") may both be reported.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")

    text_lower = text.lower()
    found: dict[str, None] = {}
    for term in SKILL_VOCABULARY:
        if term in text_lower:
            found.setdefault(canonicalize_skill(term), None)

    years = extract_experience_years(text_lower)
    logger.debug("Extracted %d skills, %d years experience", len(found), years)
    return ExtractionResult(skills=list(found), experience_years=years)
