"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain logic beyond core/errors
    - All external calls wrapped with timeout and error mapping
"""
