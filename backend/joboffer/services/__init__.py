"""Services Layer — orchestration of store IO around the pure recruiter core.

Invariants:
    - Services hold no state between calls beyond their injected stores
    - Every validation runs before the first store write of an operation
"""
