"""
Application layer package.

Use cases coordinate the domain port to fulfil one route each.
No framework or infrastructure imports allowed.
"""
