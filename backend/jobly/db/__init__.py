"""Database Infrastructure — declarative Base shared by table definitions.

Invariants:
    - Single async engine per process (initialized via init_db)
    - Repositories talk to the store through StatementExecutor, not the ORM
"""
