"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Page routes return rendered HTML; health routes return JSON

Design Decisions:
    - Thin routes delegate to resolvers (ADR: ExMA impureim sandwich)
"""
