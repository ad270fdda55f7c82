"""Infrastructure Layer — store, credential and logging adapters.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver errors are mapped onto core/errors.py before leaving this layer
"""
