"""Domain Types — record shapes shared by repositories and routes.

Invariants:
    - Records use the wire (camelCase) keys produced by the SELECT aliases

Design Decisions:
    - TypedDict records over ORM instances: repositories return plain rows
"""

from decimal import Decimal
from typing import TypedDict


class CompanyRecord(TypedDict):
    handle: str
    name: str
    description: str
    numEmployees: int | None
    logoUrl: str | None


class CompanyJobRecord(TypedDict):
    id: int
    title: str
    salary: int | None
    equity: Decimal | float | None


class CompanyDetailRecord(CompanyRecord):
    jobs: list[CompanyJobRecord]


class JobRecord(TypedDict):
    id: int
    title: str
    salary: int | None
    equity: Decimal | float | None
    companyHandle: str
