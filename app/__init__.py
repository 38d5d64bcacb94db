"""Application factory and top-level wiring for the project tracker API.

Configuration, database tables, middleware, routers and error handlers are
brought together here. ``app.main`` layers logging and metrics on top.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.errors import (
    DomainError,
    domain_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from .db.session import Base, engine
from .middlewares import RequestIdMiddleware

# Importing the models package registers every table with the metadata.
from . import models as _models  # noqa: F401

app = FastAPI(title=settings.APP_NAME)

# Tables are created on import so development and tests boot without a
# separate migration step.
Base.metadata.create_all(bind=engine)

app.add_middleware(RequestIdMiddleware)

from .routers import api_auth as api_auth_router  # noqa: E402

app.include_router(api_auth_router.router)

from .routers import api_projects as api_projects_router  # noqa: E402

app.include_router(api_projects_router.router)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(DomainError, domain_exception_handler)


__all__ = ["app"]
