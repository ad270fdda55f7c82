"""Company table — listings owner, identified by an immutable handle.

Invariants:
    - handle is the primary key; uniqueness is enforced by the store
    - num_employees, if present, is non-negative (CHECK)
    - deleting a company cascades to its jobs
"""

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobly.db.base import Base


class Company(Base):
    """Company row."""
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle: Mapped[str] = mapped_column(String(25), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    num_employees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    jobs: Mapped[list["Job"]] = relationship(
        "Job", back_populates="company",
        cascade="all, delete-orphan", passive_deletes=True,
    )
