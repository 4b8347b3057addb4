"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, database, error handlers),
``schemas``, ``repositories``, ``services`` and the HTTP routes in
``api``.
"""

from .main import app  # noqa: F401
