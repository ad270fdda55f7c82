"""Company Routes — CRUD endpoints for /api/v1/companies.

Invariants:
    - Writes (POST, PATCH, DELETE) require an admin caller
    - Reads are public
    - Filters arrive as query parameters and become a CompanyFilter
"""

from fastapi import APIRouter, Depends, Query, status

from jobly.api.dependencies import get_company_repository, require_admin
from jobly.core.filters import CompanyFilter
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services.company_repository import CompanyRepository

router = APIRouter(prefix="/api/v1/companies", tags=["companies"])


@router.post(
    "", response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_company(
    body: CompanyCreate,
    repo: CompanyRepository = Depends(get_company_repository),
):
    company = await repo.create(
        handle=body.handle,
        name=body.name,
        description=body.description,
        num_employees=body.num_employees,
        logo_url=body.logo_url,
    )
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    name_like: str | None = Query(None, alias="nameLike"),
    min_employees: int | None = Query(None, alias="minEmployees", ge=0),
    max_employees: int | None = Query(None, alias="maxEmployees", ge=0),
    repo: CompanyRepository = Depends(get_company_repository),
):
    """List companies, optionally filtered by nameLike / minEmployees / maxEmployees."""
    criteria = CompanyFilter(
        name_like=name_like,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    return {"companies": await repo.find_all(criteria)}


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(
    handle: str, repo: CompanyRepository = Depends(get_company_repository),
):
    return {"company": await repo.get(handle)}


@router.patch(
    "/{handle}", response_model=CompanyResponse,
    dependencies=[Depends(require_admin)],
)
async def update_company(
    handle: str,
    body: CompanyUpdate,
    repo: CompanyRepository = Depends(get_company_repository),
):
    return {"company": await repo.update(handle, body.changes())}


@router.delete("/{handle}", dependencies=[Depends(require_admin)])
async def delete_company(
    handle: str, repo: CompanyRepository = Depends(get_company_repository),
):
    await repo.remove(handle)
    return {"deleted": handle}
