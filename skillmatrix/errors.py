import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """Requested id is absent from the store."""

    def __init__(self, entity: str, id):
        self.entity = entity
        self.id = id
        super().__init__(f"{entity} {id} not found")


class ConflictError(Exception):
    """Write rejected because it clashes with existing rows."""


# Endpoint names are "<verb>_<entity>", e.g. create_position_skill
ROUTE_VERBS = ("list_", "get_", "create_", "update_", "delete_")


def _entity_label(request: Request) -> str:
    name = getattr(request.scope.get("route"), "name", None) or getattr(request.scope.get("endpoint"), "__name__", None)
    if not name:
        return "request"
    for verb in ROUTE_VERBS:
        if name.startswith(verb):
            name = name[len(verb):]
            break
    return name.replace("_", " ").removesuffix("s")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": f"Invalid {_entity_label(request)} data", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": f"{exc.entity} not found"})

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return JSONResponse(status_code=409, content={"message": str(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Store unreachable or statement failed: no retry, generic message
    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Store error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        # Traceback already logged by RequestLoggingMiddleware
        return JSONResponse(status_code=500, content={"message": "Internal server error"})
