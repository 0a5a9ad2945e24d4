import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_match_strength_mode
from config import settings
from models.requests import ExtractSkillsRequest, JobMatchRequest, SkillMatchRequest
from models.responses import ExtractionResponse, JobMatchResponse, ResumeUploadResponse
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchResult
from services import document_parser, job_catalog, job_matcher, skill_extractor
from services.suggestions import build_suggestions

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "vocabulary_size": len(skill_extractor.SKILL_VOCABULARY),
    }


@router.get("/skills", response_model=list[str])
async def list_skills():
    return skill_extractor.vocabulary_skills()


@router.post("/skills/extract", response_model=ExtractionResponse)
@limiter.limit(settings.rate_limit)
async def extract_skills(request: Request, body: ExtractSkillsRequest):
    result = skill_extractor.extract_skills(body.text)
    return ExtractionResponse(skills=result.skills, experience_years=result.experience_years)


@router.post("/resume/upload", response_model=ResumeUploadResponse, status_code=201)
@limiter.limit(settings.rate_limit)
async def upload_resume(request: Request, resume_file: UploadFile = File(...)):
    if not resume_file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        resume_text = document_parser.extract_document_text(
            content, resume_file.content_type, resume_file.filename
        )
    except document_parser.UnsupportedDocumentError as e:
        raise HTTPException(status_code=415, detail=str(e))
    except document_parser.DocumentParseError:
        raise HTTPException(status_code=400, detail="Could not parse resume file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from resume")

    result = skill_extractor.extract_skills(resume_text)
    logger.info(
        "Resume %s: %d skills, %d years experience",
        resume_file.filename, len(result.skills), result.experience_years,
    )
    return ResumeUploadResponse(
        filename=resume_file.filename,
        extracted_skills=result.skills,
        experience_years=result.experience_years,
        suggestions=build_suggestions(resume_text, result.skills),
    )


@router.get("/filters")
async def filters():
    return job_catalog.FILTER_OPTIONS


@router.get("/jobs", response_model=list[JobPosting])
async def list_jobs(
    search_term: str | None = None,
    skills: str | None = None,
    distance: float | None = None,
):
    skill_filter = [s.strip() for s in skills.split(",") if s.strip()] if skills else None
    return job_catalog.list_jobs(search_term=search_term, skills=skill_filter, distance=distance)


@router.get("/jobs/{job_id}", response_model=JobPosting)
async def get_job(job_id: int):
    job = job_catalog.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("/jobs/matches", response_model=list[JobMatchResponse])
async def job_matches(body: JobMatchRequest, strength: str = Depends(get_match_strength_mode)):
    jobs = job_catalog.list_jobs(
        search_term=body.search_term,
        skills=body.filter_skills,
        distance=body.distance,
    )
    ranked = job_matcher.match_jobs_to_skills(jobs, body.skills, strength=strength)
    return [
        JobMatchResponse(
            **r.job.model_dump(),
            match_percentage=r.match_percentage,
            matching_skills=r.matching_skills,
            missing_skills=r.missing_skills,
        )
        for r in ranked
    ]


@router.post("/match", response_model=MatchResult)
async def match(body: SkillMatchRequest, strength: str = Depends(get_match_strength_mode)):
    return job_matcher.score_job(body.job_skills, body.user_skills, strength=strength)
