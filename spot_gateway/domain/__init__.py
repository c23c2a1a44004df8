"""
Domain layer package.

Contains entities, port interfaces and errors for order management.
No framework imports, no IO.
"""
