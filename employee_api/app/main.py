"""
Main entrypoint for the Employee API.

This module assembles the FastAPI application, sets up logging and
error handling and includes the API router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Importing the app here makes it easy
to run with uvicorn or another ASGI server, e.g.::

    uvicorn employee_api.app.main:app --reload

``create_app`` accepts the ``EmployeeService`` the routes should use.
Tests pass their own service (backed by an isolated repository, or a
mock); when none is given the app uses an SQLite repository at the
configured database path and creates the schema on startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path, init_db
from .core.errors import setup_error_handling
from .core.logging_config import setup_logging
from .repositories.employee_repository import SQLiteEmployeeRepository
from .services.employee_service import EmployeeService

logger = logging.getLogger(__name__)


def create_app(
    employee_service: Optional[EmployeeService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    employee_service : Optional[EmployeeService]
        Service used by the employee routes.  When omitted, a service
        over ``SQLiteEmployeeRepository`` is created and the database
        schema is initialised at startup.
    settings : Optional[Settings]
        Settings to use instead of the module‑level instance.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    use_default_database = employee_service is None
    if use_default_database:
        employee_service = EmployeeService(SQLiteEmployeeRepository(get_database_path()))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if use_default_database:
            init_db()
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.employee_service = employee_service

    setup_error_handling(app)
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
