"""Services Layer — orchestrates repositories around the pure core.

Invariants:
    - Services do IO only through repository protocols
    - Shaping of records delegated to core/presenter.py
"""
