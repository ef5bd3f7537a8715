"""Infrastructure Layer — database access, store implementations and logging setup.

Invariants:
    - Store implementations satisfy the Protocols in core/repository_protocols.py
    - Raw SQLAlchemy exceptions never leave this layer: they become core/errors.py types
"""
