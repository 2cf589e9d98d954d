"""Pydantic Schemas — request/response models for API endpoints.

Invariants:
    - Request DTOs are frozen and loosely typed (str | None): business rules are
      checked by core/user_rules.py, so every violation is reported at once
    - Every response body is an Envelope

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
