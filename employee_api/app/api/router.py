"""
Top‑level API router.

Aggregates domain‑specific routers under a unified prefix.  The
application mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["employees"])
