from fastapi import APIRouter, Depends, HTTPException

from jobpoll.app.api.deps import get_job_service
from jobpoll.app.schemas.jobs import JobOut
from jobpoll.domain.models import JobNotFoundError
from jobpoll.domain.services.job_service import JobService

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.post("", response_model=JobOut, status_code=202)
async def create_job(service: JobService = Depends(get_job_service)):
    """
    Create a new job. The response is always pending; poll
    ``GET /api/jobs/{job_id}`` until ``done`` is true.
    """
    return JobOut.from_state(service.create_job())


@router.get("/{job_id}", response_model=JobOut)
async def get_job(job_id: str, service: JobService = Depends(get_job_service)):
    try:
        state = service.get_job(job_id)
    except JobNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return JobOut.from_state(state)
