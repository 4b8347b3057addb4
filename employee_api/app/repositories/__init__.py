"""
Persistence abstractions and their SQLite and in‑memory implementations.
"""
