"""Static job catalog for the Bay Area handyman board."""

from collections.abc import Sequence

from models.schemas.job_posting import JobPosting


def _description(title: str) -> str:
    return f"We are looking for an experienced {title} to join our team..."


JOBS: tuple[JobPosting, ...] = (
    JobPosting(
        id=1,
        title="Residential Plumbing Specialist",
        company="HomeFixers Inc.",
        location="San Francisco, CA",
        distance_miles=3.2,
        employment_type="Full-time",
        salary="$35-45/hr",
        description=_description("Residential Plumbing Specialist"),
        skills=["Plumbing", "Pipe Fitting", "Fixture Installation"],
    ),
    JobPosting(
        id=2,
        title="General Maintenance Technician",
        company="City Property Management",
        location="San Francisco, CA",
        distance_miles=1.8,
        employment_type="Full-time",
        salary="$30-40/hr",
        description=_description("General Maintenance Technician"),
        skills=["Plumbing", "Electrical", "Carpentry", "Painting", "Drywall"],
    ),
    JobPosting(
        id=3,
        title="Home Renovation Specialist",
        company="RenovateRight Contractors",
        location="Oakland, CA",
        distance_miles=5.6,
        employment_type="Contract",
        salary="$40-50/hr",
        description=_description("Home Renovation Specialist"),
        skills=["Carpentry", "Drywall", "Tile Work", "Painting", "Flooring"],
    ),
    JobPosting(
        id=4,
        title="Commercial Electrician",
        company="PowerPro Services",
        location="San Jose, CA",
        distance_miles=45.2,
        employment_type="Full-time",
        salary="$50-60/hr",
        description=_description("Commercial Electrician"),
        skills=["Electrical", "Wiring", "Circuit Installation", "Troubleshooting"],
    ),
    JobPosting(
        id=5,
        title="Handyman - Multiple Properties",
        company="Bay Area Property Management",
        location="San Francisco, CA",
        distance_miles=2.5,
        employment_type="Part-time",
        salary="$25-35/hr",
        description=_description("Handyman - Multiple Properties"),
        skills=["Plumbing", "Electrical", "Drywall", "Painting", "Basic Repairs"],
    ),
)


def list_jobs(
    search_term: str | None = None,
    skills: Sequence[str] | None = None,
    distance: float | None = None,
) -> list[JobPosting]:
    """Return catalog jobs, optionally filtered.

    search_term matches title, company or description case-insensitively;
    skills keeps jobs requiring at least one of the given skill names exactly;
    distance keeps jobs within that many miles.
    """
    jobs = list(JOBS)

    if search_term:
        term = search_term.lower()
        jobs = [
            job for job in jobs
            if term in job.title.lower()
            or term in job.company.lower()
            or term in job.description.lower()
        ]

    if distance:
        jobs = [job for job in jobs if job.distance_miles <= distance]

    if skills:
        wanted = set(skills)
        jobs = [job for job in jobs if any(s in wanted for s in job.skills)]

    return jobs


def get_job(job_id: int) -> JobPosting | None:
    for job in JOBS:
        if job.id == job_id:
            return job
    return None


FILTER_OPTIONS: dict[str, list[str]] = {
    "job_types": ["Full-time", "Part-time", "Contract", "Temporary"],
    "salary_ranges": ["Under $25/hr", "$25-35/hr", "$35-50/hr", "Over $50/hr"],
    "experience_levels": ["Entry Level", "Mid Level", "Senior Level"],
}
