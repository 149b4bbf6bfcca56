"""Core Layer: domain types, errors, and pure computations. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Scoring and stats functions are pure and deterministic
"""
