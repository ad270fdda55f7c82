"""Services Layer — repositories composing clause builders with statement templates.

Invariants:
    - Repositories receive a StatementExecutor; they never open sessions themselves
    - Store constraint errors are translated into domain errors here
"""
