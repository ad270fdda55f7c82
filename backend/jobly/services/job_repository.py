"""Job Repository — create, findAll, get, update, remove against the jobs table.

Invariants:
    - get/update/remove address the jobs table by id, never companies
    - company_handle is fixed at creation; updates touch title/salary/equity only
    - An unknown company_handle on create is a validation failure (store FK)
"""

import logging
from typing import Any, Mapping

from jobly.core.domain_types import JobRecord
from jobly.core.errors import (
    CheckViolationError,
    ForeignKeyViolationError,
    ResourceNotFoundError,
    ValidationFailedError,
)
from jobly.core.filters import JobFilter
from jobly.core.repository_protocols import StatementExecutor
from jobly.core.sql_clauses import build_partial_update, build_predicate, where_clause

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "salary", "equity"})

_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


def _range_error() -> ValidationFailedError:
    return ValidationFailedError(
        "salary must be non-negative and equity between 0 and 1",
    )


class JobRepository:
    """Related functions for jobs."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    async def create(
        self,
        title: str,
        company_handle: str,
        salary: int | None = None,
        equity: float | None = None,
    ) -> JobRecord:
        """Insert a job; the returned record carries the store-assigned id."""
        try:
            rows = await self.executor.execute(
                f"""
                INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {_COLUMNS}""",
                [title, salary, equity, company_handle],
            )
        except ForeignKeyViolationError:
            raise ValidationFailedError(
                f"No company: {company_handle}", field="companyHandle",
            )
        except CheckViolationError:
            raise _range_error()
        job = rows[0]
        logger.info("Job created", extra={"entity": "Job", "identifier": job["id"]})
        return job

    async def find_all(self, criteria: JobFilter | None = None) -> list[JobRecord]:
        """All jobs matching the optional criteria, ordered by title."""
        fragment, values = build_predicate(criteria)
        return await self.executor.execute(
            f"""
            SELECT {_COLUMNS}
            FROM jobs
            {where_clause(fragment)}
            ORDER BY title""",
            values,
        )

    async def get(self, job_id: int) -> JobRecord:
        rows = await self.executor.execute(
            f"""
            SELECT {_COLUMNS}
            FROM jobs
            WHERE id = $1""",
            [job_id],
        )
        if not rows:
            raise ResourceNotFoundError("Job", str(job_id))
        return rows[0]

    async def update(self, job_id: int, data: Mapping[str, Any]) -> JobRecord:
        """Partial update of title/salary/equity.

        Raises ValidationFailedError for an empty payload or a non-updatable
        field, ResourceNotFoundError if the id is unknown.
        """
        immutable = set(data) - UPDATABLE_FIELDS
        if immutable:
            raise ValidationFailedError(
                f"Cannot update: {', '.join(sorted(immutable))}",
                field=sorted(immutable)[0],
            )
        set_cols, values = build_partial_update(data, {})
        id_idx = f"${len(values) + 1}"

        try:
            rows = await self.executor.execute(
                f"""
                UPDATE jobs
                SET {set_cols}
                WHERE id = {id_idx}
                RETURNING {_COLUMNS}""",
                [*values, job_id],
            )
        except CheckViolationError:
            raise _range_error()
        if not rows:
            raise ResourceNotFoundError("Job", str(job_id))
        logger.info(
            f"Job updated: {', '.join(data)}",
            extra={"entity": "Job", "identifier": job_id},
        )
        return rows[0]

    async def remove(self, job_id: int) -> None:
        rows = await self.executor.execute(
            """
            DELETE FROM jobs
            WHERE id = $1
            RETURNING id""",
            [job_id],
        )
        if not rows:
            raise ResourceNotFoundError("Job", str(job_id))
        logger.info("Job removed", extra={"entity": "Job", "identifier": job_id})
