"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports core/ domain logic (only core/errors.py for mapping)
    - All storage failures leave this layer as PersistenceError

Design Decisions:
    - Session manager wraps the raw engine so callers never see SQLAlchemy exceptions
"""
