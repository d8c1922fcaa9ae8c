from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import LOG_LEVEL
from .routes.generate import router as generate_router
from .routes.health import router as health_router
from .routes.providers import router as providers_router
from .services.suggestions import build_error_body
from .utils.exceptions import GameManualError, InvalidInputError, log_error

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# httpx logs full request URLs at INFO, including query-string credentials.
logging.getLogger("httpx").setLevel(logging.WARNING)

FALLBACK_MESSAGE = (
    "Failed to generate game manual. The service may be temporarily unavailable."
)


app = FastAPI(title="Language Game Manual", version="0.1.0")


@app.middleware("http")
async def unexpected_error_middleware(request: Request, call_next):
    """Must stay inside CORSMiddleware: the fallback 500 carries CORS headers."""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse({"error": {"message": FALLBACK_MESSAGE}}, status_code=500)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(GameManualError)
async def game_manual_error_handler(request: Request, exc: GameManualError):
    log_error(exc, logger, level="warning" if exc.status_code < 500 else "error")
    return JSONResponse(build_error_body(exc), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    if any("word" in err.get("loc", ()) for err in exc.errors()):
        message = "Word is required and must be a non-empty string."
    else:
        message = "Invalid request body."
    return await game_manual_error_handler(request, InvalidInputError(message))


app.include_router(health_router)
app.include_router(providers_router)
app.include_router(generate_router)
