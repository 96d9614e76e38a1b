"""Infrastructure Layer — database pool and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures leave this layer as DatabaseError, never as raw driver errors
"""
