"""Table Definitions — SQLAlchemy declarative models for companies and jobs.

Invariants:
    - All models inherit from Base (db/base.py)
    - Used to create the schema (tests, local dev); reads and writes go
      through parameterized statements in services/

Design Decisions:
    - All models imported here so ForeignKey targets resolve before create_all
"""

from jobly.models.company import Company  # noqa: F401
from jobly.models.job import Job  # noqa: F401
