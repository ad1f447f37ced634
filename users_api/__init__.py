"""Users API Package — single-resource HTTP service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
