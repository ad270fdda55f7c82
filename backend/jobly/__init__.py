"""Jobly Application Package — company and job listings service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
