import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashdeck.core.config import settings
from flashdeck.core.database import init_models
from flashdeck.core.errors import AppError
from flashdeck.core.logging_config import setup_logging
from flashdeck.routers import auth, flashcards, groups, sets, users

logger = logging.getLogger(__name__)


def error_response(message, status: int, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"error": {"message": message, "status": status}},
        headers=headers,
    )


def format_validation_errors(exc: RequestValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err['msg']}" if location else err["msg"])
    return messages


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_models()
    logger.info("flashdeck started")
    yield


app = FastAPI(title="Flashdeck Backend", lifespan=lifespan)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.message, exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(format_validation_errors(exc), 400)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.detail, exc.status_code, headers=getattr(exc, "headers", None))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return error_response("Duplicate or invalid reference", 400)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if settings.DEBUG else "Internal Server Error"
    return error_response(message, 500)


app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(sets.router, prefix="/sets", tags=["sets"])
app.include_router(flashcards.router, prefix="/flashcards", tags=["flashcards"])
app.include_router(groups.router, prefix="/groups", tags=["groups"])

if __name__ == "__main__":
    uvicorn.run("flashdeck.main:app", host="0.0.0.0", port=8000, reload=True)
