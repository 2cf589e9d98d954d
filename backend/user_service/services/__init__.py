"""Services Layer — request mappers, operation handlers, and request dispatch.

Invariants:
    - Handlers split by resource (users, auth), one method per command/query
    - Dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - One handler file per resource for locality (ADR: no god objects)
"""
