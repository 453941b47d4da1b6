"""WP Frontend — server-rendered presentation layer for a headless WordPress backend.

Invariants:
    - Package root contains no executable code beyond the version string

Design Decisions:
    - Explicit imports only, no star exports (ADR: ExMA no convention-over-config)
"""

__version__ = "1.0.0"
