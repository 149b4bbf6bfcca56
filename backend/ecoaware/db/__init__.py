"""Database Package: declarative Base, session factory and seed script.

Invariants:
    - Single async engine per process for the API (see infrastructure/database.py)
    - Scripts and tests build their own factories via db/session.py
"""
