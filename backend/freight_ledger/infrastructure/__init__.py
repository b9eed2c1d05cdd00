"""Infrastructure Layer — storage backends, security and cross-cutting concerns.

Invariants:
    - Infrastructure depends on core/ (errors, field rules), never the reverse
    - All driver/IO failures mapped to core.errors.StorageError

Design Decisions:
    - One module per backend; store_factory picks one at startup
"""
