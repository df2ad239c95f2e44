"""
Process-wide pieces of the pizza API: environment settings, logging setup,
and the asyncpg-backed `Database` handle shared by every request.
"""
