"""
Pydantic schema definitions for entity records and API payloads.

Each domain (businesses, customers, transactions, etc.) defines its
own Pydantic models: a ``Create`` payload, a partial ``Update``
payload and a ``Read`` model, which is also the record type held in
the store.
"""
