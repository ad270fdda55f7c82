"""Company Repository — create, findAll, get, update, remove against the companies table.

Invariants:
    - Every filter goes through build_predicate, every update through build_partial_update
    - Validation errors are raised before the executor is called
    - handle never appears in a SET fragment; only UPDATABLE_FIELDS reach the store
    - Duplicate handles are rejected by the store's primary key, not a pre-check

Design Decisions:
    - Raw parameterized SQL over ORM queries: SELECT aliases produce wire-shaped
      rows (numEmployees, logoUrl) without a mapping layer
"""

import logging
import re
from typing import Any, Mapping

from jobly.core.domain_types import CompanyDetailRecord, CompanyRecord
from jobly.core.errors import (
    CheckViolationError,
    DuplicateResourceError,
    ResourceNotFoundError,
    UniqueViolationError,
    ValidationFailedError,
)
from jobly.core.filters import CompanyFilter
from jobly.core.repository_protocols import StatementExecutor
from jobly.core.sql_clauses import build_partial_update, build_predicate, where_clause

logger = logging.getLogger(__name__)

COLUMN_NAMES = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

UPDATABLE_FIELDS = frozenset({"name", "description", "numEmployees", "logoUrl"})

_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'

# companies_name_key (PostgreSQL) or companies.name (SQLite)
_NAME_CONSTRAINT = re.compile(r"companies[._]name")


def _collides_on_name(exc: UniqueViolationError) -> bool:
    return bool(_NAME_CONSTRAINT.search(exc.constraint or exc.message))


class CompanyRepository:
    """Related functions for companies."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    async def create(
        self,
        handle: str,
        name: str,
        description: str,
        num_employees: int | None = None,
        logo_url: str | None = None,
    ) -> CompanyRecord:
        """Insert a company and echo it back.

        Raises DuplicateResourceError naming the taken handle or name.
        """
        try:
            rows = await self.executor.execute(
                f"""
                INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {_COLUMNS}""",
                [handle, name, description, num_employees, logo_url],
            )
        except UniqueViolationError as e:
            raise DuplicateResourceError(
                "Company", name if _collides_on_name(e) else handle,
            )
        except CheckViolationError:
            raise ValidationFailedError(
                "numEmployees must be non-negative", field="numEmployees",
            )
        logger.info("Company created", extra={"entity": "Company", "identifier": handle})
        return rows[0]

    async def find_all(self, criteria: CompanyFilter | None = None) -> list[CompanyRecord]:
        """All companies matching the optional criteria, ordered by name."""
        fragment, values = build_predicate(criteria)
        return await self.executor.execute(
            f"""
            SELECT {_COLUMNS}
            FROM companies
            {where_clause(fragment)}
            ORDER BY name""",
            values,
        )

    async def get(self, handle: str) -> CompanyDetailRecord:
        """Company plus its jobs ([{id, title, salary, equity}], ordered by id).

        Raises ResourceNotFoundError if the handle is unknown.
        """
        rows = await self.executor.execute(
            f"""
            SELECT {_COLUMNS}
            FROM companies
            WHERE handle = $1""",
            [handle],
        )
        if not rows:
            raise ResourceNotFoundError("Company", handle)

        jobs = await self.executor.execute(
            """
            SELECT id, title, salary, equity
            FROM jobs
            WHERE company_handle = $1
            ORDER BY id""",
            [handle],
        )
        return {**rows[0], "jobs": jobs}

    async def update(self, handle: str, data: Mapping[str, Any]) -> CompanyRecord:
        """Partial update: only keys present in data change.

        data may include: name, description, numEmployees, logoUrl.
        Raises ValidationFailedError for an empty payload or any other key
        (handle included), ResourceNotFoundError if the handle is unknown.
        """
        rejected = set(data) - UPDATABLE_FIELDS
        if rejected:
            raise ValidationFailedError(
                f"Cannot update: {', '.join(sorted(rejected))}",
                field=sorted(rejected)[0],
            )
        set_cols, values = build_partial_update(data, COLUMN_NAMES)
        handle_idx = f"${len(values) + 1}"

        try:
            rows = await self.executor.execute(
                f"""
                UPDATE companies
                SET {set_cols}
                WHERE handle = {handle_idx}
                RETURNING {_COLUMNS}""",
                [*values, handle],
            )
        except UniqueViolationError:
            raise DuplicateResourceError("Company", str(data.get("name", handle)))
        except CheckViolationError:
            raise ValidationFailedError(
                "numEmployees must be non-negative", field="numEmployees",
            )
        if not rows:
            raise ResourceNotFoundError("Company", handle)
        logger.info(
            f"Company updated: {', '.join(data)}",
            extra={"entity": "Company", "identifier": handle},
        )
        return rows[0]

    async def remove(self, handle: str) -> None:
        """Delete a company (and, by cascade, its jobs).

        Raises ResourceNotFoundError if the handle is unknown.
        """
        rows = await self.executor.execute(
            """
            DELETE FROM companies
            WHERE handle = $1
            RETURNING handle""",
            [handle],
        )
        if not rows:
            raise ResourceNotFoundError("Company", handle)
        logger.info("Company removed", extra={"entity": "Company", "identifier": handle})
