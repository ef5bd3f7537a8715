"""Core Layer — recruiter aggregate, invariants and reconciliation. No IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/ or db/
    - Validation and reconciliation functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: stores are consumed through
      the Protocols in repository_protocols.py
"""
