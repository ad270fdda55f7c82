"""Filter Criteria — per-entity, optional, sparse predicates for findAll.

Invariants:
    - A criterion is present iff its attribute is not None (0 and "" are present)
    - CompanyFilter and JobFilter are distinct types; the predicate builder
      keys its condition table on the type, so one can never stand in for the other
    - validate() runs before any clause fragment is built

Design Decisions:
    - Frozen dataclasses: criteria are ephemeral values, never mutated or persisted
"""

from dataclasses import dataclass, fields

from jobly.core.errors import ValidationFailedError


@dataclass(frozen=True)
class _FilterBase:

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def validate(self) -> None:
        """Cross-field checks. Default: none."""


@dataclass(frozen=True)
class CompanyFilter(_FilterBase):
    """Company criteria: name substring plus inclusive employee-count bounds."""
    name_like: str | None = None
    min_employees: int | None = None
    max_employees: int | None = None

    def validate(self) -> None:
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise ValidationFailedError(
                "minimum employees cannot be greater than maximum employees",
                field="minEmployees",
            )


@dataclass(frozen=True)
class JobFilter(_FilterBase):
    """Job criteria: title substring, salary floor, equity presence."""
    title: str | None = None
    min_salary: int | None = None
    has_equity: bool | None = None
