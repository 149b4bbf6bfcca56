"""EcoAware Application Package: environmental community REST API.

Invariants:
    - Package root contains no executable code (no import side-effects)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
