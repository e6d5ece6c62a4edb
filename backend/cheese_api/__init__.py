"""Cheese Shop Application Package — read-only catalog API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
