"""Pydantic Schemas — stored documents and API contracts.

Invariants:
    - Stored JSON documents validate through these models on every load
    - Domain enums from core/ used for role and plan fields

Design Decisions:
    - One model serves storage and API where shapes agree; UserPublic strips
      the password so it never leaves the service
"""
