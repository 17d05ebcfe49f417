import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from giveback.config import settings
from giveback.exceptions import (
    ForbiddenError,
    GivebackError,
    InvalidContentError,
    NotFoundError,
    PartialFailureError,
)
from giveback.routers import event_responses, events, requests, users

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("giveback")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create schema and apply pending migrations
    from giveback.database import init_db
    init_db()
    logger.info("Database ready at %s", settings.db_path)
    yield


app = FastAPI(
    title="Giveback",
    description="Community donation requests, donation drives and responses",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, exc: GivebackError) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": exc.message, **exc.details})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("%s %s - not found: %s", request.method, request.url.path, exc.message)
    return _error_response(404, exc)


@app.exception_handler(InvalidContentError)
async def invalid_content_handler(request: Request, exc: InvalidContentError):
    logger.warning("%s %s - invalid content: %s", request.method, request.url.path, exc.message)
    status_code = 413 if exc.reason == InvalidContentError.TOO_LONG else 400
    return _error_response(status_code, exc)


@app.exception_handler(ForbiddenError)
async def forbidden_handler(request: Request, exc: ForbiddenError):
    logger.warning("%s %s - forbidden: %s", request.method, request.url.path, exc.message)
    return _error_response(403, exc)


@app.exception_handler(PartialFailureError)
async def partial_failure_handler(request: Request, exc: PartialFailureError):
    logger.error("%s %s - partial failure: %s", request.method, request.url.path, exc.message)
    return _error_response(409, exc)


app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(requests.router, prefix=settings.api_prefix)
app.include_router(events.router, prefix=settings.api_prefix)
app.include_router(event_responses.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
