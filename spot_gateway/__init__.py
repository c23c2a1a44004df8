"""
Spot Gateway: HTTP facade over the Binance Spot trading API.

Application package root. Layered the same way as the rest of the
codebase (ports & adapters):

Layers:
    - domain: Entities, port interfaces (ABCs), errors.
    - application: Use cases and DTOs, one use case per route.
    - infrastructure: The binance-connector adapter implementing the port.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, logging, middleware).
"""
