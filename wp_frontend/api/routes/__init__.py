"""Route Modules — one file per concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain fetch logic (delegate to services/ resolvers)

Design Decisions:
    - Explicit registration in main.py over auto-discovery (ADR: ExMA anti-pattern)
"""
