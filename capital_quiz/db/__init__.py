"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Every ORM model inherits from db/base.py's Base
    - Engine and sessions live in infrastructure/database.py, not here

Design Decisions:
    - aiosqlite driver: the quiz persists to one local, process-local data file
"""
