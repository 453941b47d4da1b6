"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ (resolvers depend on it, not the reverse)
    - All upstream calls wrapped with timeout/error mapping

Design Decisions:
    - Thin wrappers over raw clients (httpx, Jinja2): the rest of the app sees our types
"""
