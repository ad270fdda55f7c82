"""Job Routes — CRUD endpoints for /api/v1/jobs.

Invariants:
    - Writes (POST, PATCH, DELETE) require an admin caller
    - Reads are public
    - hasEquity=false is the same as leaving it out
"""

from fastapi import APIRouter, Depends, Query, status

from jobly.api.dependencies import get_job_repository, require_admin
from jobly.core.filters import JobFilter
from jobly.schemas.job import JobCreate, JobListResponse, JobResponse, JobUpdate
from jobly.services.job_repository import JobRepository

router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])


@router.post(
    "", response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_job(
    body: JobCreate, repo: JobRepository = Depends(get_job_repository),
):
    job = await repo.create(
        title=body.title,
        company_handle=body.company_handle,
        salary=body.salary,
        equity=body.equity,
    )
    return {"job": job}


@router.get("", response_model=JobListResponse)
async def list_jobs(
    title: str | None = Query(None),
    min_salary: int | None = Query(None, alias="minSalary", ge=0),
    has_equity: bool | None = Query(None, alias="hasEquity"),
    repo: JobRepository = Depends(get_job_repository),
):
    criteria = JobFilter(title=title, min_salary=min_salary, has_equity=has_equity)
    return {"jobs": await repo.find_all(criteria)}


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, repo: JobRepository = Depends(get_job_repository)):
    return {"job": await repo.get(job_id)}


@router.patch(
    "/{job_id}", response_model=JobResponse,
    dependencies=[Depends(require_admin)],
)
async def update_job(
    job_id: int,
    body: JobUpdate,
    repo: JobRepository = Depends(get_job_repository),
):
    return {"job": await repo.update(job_id, body.changes())}


@router.delete("/{job_id}", dependencies=[Depends(require_admin)])
async def delete_job(job_id: int, repo: JobRepository = Depends(get_job_repository)):
    await repo.remove(job_id)
    return {"deleted": job_id}
