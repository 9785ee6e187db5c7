"""Infrastructure Layer — database sessions, SQL-backed stores, locks, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
"""
