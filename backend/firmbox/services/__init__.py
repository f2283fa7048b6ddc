"""Services Layer — generation and document-link handlers.

Invariants:
    - Handlers share one error-translation routine (error_translation.py)
    - Services hold only read-only collaborators; no per-request state on self
"""
