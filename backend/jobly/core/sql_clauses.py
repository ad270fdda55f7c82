"""SQL Clause Builders — SET fragments for partial updates, WHERE fragments for filters.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Placeholders are $1..$n, consecutive, in emission order
    - Partial update emits in input order; predicates emit in the fixed
      per-entity order of their condition table, never input order
    - An empty update payload always raises; a no-op write is never produced
    - Empty criteria yield ("", []); callers omit WHERE entirely

Design Decisions:
    - One generic predicate builder driven by a table keyed on the filter type,
      instead of one hand-written builder per entity
    - Values travel out-of-band; user text never lands in the statement
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from jobly.core.errors import ValidationFailedError
from jobly.core.filters import CompanyFilter, JobFilter


def build_partial_update(
    data: Mapping[str, Any], column_names: Mapping[str, str] | None = None,
) -> tuple[str, list[Any]]:
    """Build a SET fragment and its values from the supplied fields.

    {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}
        => ('"first_name"=$1, "age"=$2', ["Aliya", 32])

    A None value clears the column. The caller binds any trailing key
    (e.g. the row identifier) at placeholder len(values) + 1.
    """
    if not data:
        raise ValidationFailedError("No data")
    column_names = column_names or {}

    assignments = []
    values = []
    for idx, (key, value) in enumerate(data.items(), start=1):
        assignments.append(f'"{column_names.get(key, key)}"=${idx}')
        values.append(value)
    return ", ".join(assignments), values


# ─── Predicates ──────────────────────────────────────────────────

def _contains(text: str) -> str:
    return f"%{text}%"


def _equity_floor(has_equity: bool) -> int | None:
    return 0 if has_equity else None


@dataclass(frozen=True)
class Condition:
    """One recognized criterion: filter attribute -> SQL condition template.

    template holds a single "{}" where the placeholder goes. transform maps the
    criterion value to the bound value; returning None drops the condition.
    """
    attribute: str
    template: str
    transform: Callable[[Any], Any] | None = None


COMPANY_CONDITIONS: tuple[Condition, ...] = (
    Condition("min_employees", "num_employees >= {}"),
    Condition("max_employees", "num_employees <= {}"),
    Condition("name_like", "name ILIKE {}", _contains),
)

JOB_CONDITIONS: tuple[Condition, ...] = (
    Condition("min_salary", "salary >= {}"),
    Condition("has_equity", "equity > {}", _equity_floor),
    Condition("title", "title ILIKE {}", _contains),
)

_CONDITION_TABLES: dict[type, tuple[Condition, ...]] = {
    CompanyFilter: COMPANY_CONDITIONS,
    JobFilter: JOB_CONDITIONS,
}


def build_predicate(
    criteria: CompanyFilter | JobFilter | None,
) -> tuple[str, list[Any]]:
    """Build an AND-joined condition fragment (no WHERE keyword) and its values.

    CompanyFilter(min_employees=2, max_employees=5, name_like="co")
        => ("num_employees >= $1 AND num_employees <= $2 AND name ILIKE $3",
            [2, 5, "%co%"])
    """
    if criteria is None:
        return "", []
    table = _CONDITION_TABLES.get(type(criteria))
    if table is None:
        raise TypeError(f"No condition table for {type(criteria).__name__}")

    criteria.validate()

    conditions = []
    values: list[Any] = []
    for condition in table:
        value = getattr(criteria, condition.attribute)
        if value is None:
            continue
        if condition.transform is not None:
            value = condition.transform(value)
            if value is None:
                continue
        values.append(value)
        conditions.append(condition.template.format(f"${len(values)}"))
    return " AND ".join(conditions), values


def where_clause(fragment: str) -> str:
    """Prefix a non-empty predicate fragment with WHERE."""
    return f"WHERE {fragment}" if fragment else ""
