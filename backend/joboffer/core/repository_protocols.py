"""Boundary Protocols — store contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; implementations are injected into the service
    - find() returns None for a missing identity, never raises for it
    - insert() raises ConflictError when the store's own unique constraint rejects the row
    - RecruiterStore.update() replaces the whole aggregate, nested collections included,
      in one transaction; ResourceNotFoundError if the identity is not stored

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: implementations do IO; core functions that use the results stay sync
    - The store is the authority for uniqueness: a find() miss followed by a racing
      insert still ends in ConflictError from the constraint
"""

from typing import Protocol

from joboffer.core.entities import Company, Recruiter


class CompanyStore(Protocol):
    """Contract for company persistence, implemented by shell."""
    async def find(self, name: str, activity: str) -> Company | None: ...
    async def insert(self, company: Company) -> Company: ...


class RecruiterStore(Protocol):
    """Contract for recruiter aggregate persistence, implemented by shell.

    insert() links client companies by identity and stores any that are not yet
    present inside the same transaction; whether that is allowed is decided
    by the caller.
    """
    async def find(
        self, first_name: str, last_name: str, identity_card: str,
    ) -> Recruiter | None: ...
    async def insert(self, recruiter: Recruiter) -> Recruiter: ...
    async def update(self, recruiter: Recruiter) -> Recruiter: ...
