"""Company Schemas — create/update payloads and response envelopes.

Invariants:
    - CompanyUpdate never accepts handle (immutable after creation)
    - name/description may be omitted from an update but never cleared
    - numEmployees, when given, is non-negative
"""

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from jobly.schemas import CamelModel


class CompanyCreate(CamelModel):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: int | None = Field(None, ge=0)
    logo_url: str | None = None


class CompanyUpdate(CamelModel):
    """Partial update: only fields present in the request body are applied."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
    )

    name: str | None = Field(None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(None, ge=0)
    logo_url: str | None = None

    @field_validator("name", "description")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("cannot be cleared")
        return v

    def changes(self) -> dict:
        """Supplied fields keyed by wire name; explicit nulls are kept."""
        return self.model_dump(exclude_unset=True, by_alias=True)


class CompanyJobOut(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: float | None = None


class CompanyOut(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyDetailOut(CompanyOut):
    jobs: list[CompanyJobOut] = []


class CompanyResponse(CamelModel):
    company: CompanyOut


class CompanyDetailResponse(CamelModel):
    company: CompanyDetailOut


class CompanyListResponse(CamelModel):
    companies: list[CompanyOut]
