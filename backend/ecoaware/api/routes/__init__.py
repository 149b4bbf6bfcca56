"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services/)
    - Every router lives under /api

Design Decisions:
    - Explicit registration in main.py over auto-discovery
    - Resources owned by the caller (/api/user/...) grouped in me.py
"""
