"""Job table — a posting owned by exactly one company.

Invariants:
    - id is assigned by the store
    - salary, if present, is non-negative; equity, if present, lies in [0, 1]
    - company_handle must reference an existing company (FK, ON DELETE CASCADE)
"""

from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobly.db.base import Base


class Job(Base):
    """Job row."""
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity >= 0 AND equity <= 1.0", name="ck_jobs_equity"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    equity: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    company_handle: Mapped[str] = mapped_column(
        ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False,
    )

    company: Mapped["Company"] = relationship("Company", back_populates="jobs")
