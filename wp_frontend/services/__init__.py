"""Services Layer — sidebar aggregation and the three view resolvers.

Invariants:
    - Resolvers return a ViewResult; they never render and never raise
    - Independent upstream calls inside one resolver run concurrently (fetch_with_sidebar)

Design Decisions:
    - One resolver file per route family for locality (ADR: ExMA no god objects)
"""
