"""
Service layer abstraction.

Each service encapsulates logic for a domain.  All entities share the
generic ``CrudService``; relationship queries and statistics are
built on top of it.  Swapping the in‑memory sequences for database
queries would not change the API handlers.
"""
