"""Services Layer: one service class per aggregate, constructed per request.

Invariants:
    - Services receive an AsyncSession and own their commits
    - Not-found and rule violations raised as EcoAwareError subclasses

Design Decisions:
    - Plain classes, no registry: routes instantiate what they need
"""
