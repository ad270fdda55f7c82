"""Job Schemas — create/update payloads and response envelopes.

Invariants:
    - JobUpdate never accepts companyHandle (owner fixed at creation)
    - salary >= 0; 0 <= equity <= 1
"""

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from jobly.schemas import CamelModel


class JobCreate(CamelModel):
    title: str = Field(min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: float | None = Field(None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
    )

    title: str | None = Field(None, min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: float | None = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("cannot be cleared")
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, by_alias=True)


class JobOut(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: float | None = None
    company_handle: str


class JobResponse(CamelModel):
    job: JobOut


class JobListResponse(CamelModel):
    jobs: list[JobOut]
