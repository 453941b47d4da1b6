"""Pydantic Schemas — validation of upstream payloads at the system boundary.

Invariants:
    - Schemas validate what the content backend returns before resolvers use it
    - Entities stay plain dicts for templates; schemas only check the fields we read

Design Decisions:
    - Separate from core/: core holds our types, schemas hold the backend's contract
"""
