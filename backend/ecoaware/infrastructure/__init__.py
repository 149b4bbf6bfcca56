"""Infrastructure Layer: database, identity provider client, logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All external failures mapped to EcoAwareError subclasses (core/errors.py)
"""
