"""QKart Backend Package — authentication, catalog and cart transaction engine.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
