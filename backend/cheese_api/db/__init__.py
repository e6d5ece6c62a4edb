"""Database Infrastructure — declarative Base, script session factory, and seed data.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
