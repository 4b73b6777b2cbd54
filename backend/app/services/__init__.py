"""Service Layer — imperative shell around the pure core.

Invariants:
    - Services own the session-level unit of work (flush, commit, rollback)
    - Domain rules come from core/; SQL construction stays in this layer
"""
