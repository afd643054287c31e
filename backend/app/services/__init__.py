"""Services Layer — ORM-backed implementations of the entity service contracts.

Invariants:
    - One service class per entity, constructed per request with its AsyncSession
    - Services return None for missing records; controllers decide the HTTP error
    - Dangling references (unknown address / customer ids) raise NotFoundError

Design Decisions:
    - Shared where/orderBy translation in query_builder: entity services only
      declare their relation columns
"""
