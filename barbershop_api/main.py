# barbershop_api/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from barbershop_api import config
from barbershop_api.db import init_db
from barbershop_api.errors import ApiError, InternalError
from barbershop_api.logging_config import setup_logging
from barbershop_api.responses import failure
from barbershop_api.routers import (
    appointments_routes,
    auth_routes,
    barbershops_routes,
    breakingtimes_routes,
    employees_routes,
    schedules_routes,
    services_routes,
    users_routes,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready (%s, %s resolver)", config.DATABASE_URL, config.RESOLVER_STRATEGY)
    yield


async def handle_api_error(request: Request, exc: ApiError):
    return failure(exc.status_code, exc.message, exc.details, exc.headers)


async def handle_request_validation(request: Request, exc: RequestValidationError):
    fields = []
    for error in exc.errors():
        # drop the "body" / "path" / "query" prefix FastAPI adds
        loc = [str(part) for part in error["loc"][1:]] or [str(error["loc"][0])]
        fields.append({"field": ".".join(loc), "message": error["msg"]})
    return failure(400, "Invalid fields", fields)


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    return failure(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def handle_unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return failure(InternalError.status_code, InternalError.default_message)


def create_app() -> FastAPI:
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)

    app = FastAPI(title="Barbershop API", lifespan=lifespan)

    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)

    app.include_router(auth_routes.router)
    app.include_router(users_routes.router)
    app.include_router(barbershops_routes.router)
    app.include_router(employees_routes.router)
    app.include_router(services_routes.router)
    app.include_router(schedules_routes.router)
    app.include_router(breakingtimes_routes.router)
    app.include_router(appointments_routes.router)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
