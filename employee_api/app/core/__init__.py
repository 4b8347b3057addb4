"""
Cross‑cutting concerns: configuration, logging, database access and
exception handlers.
"""
