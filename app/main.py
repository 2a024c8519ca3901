"""Greeting Responder: two static plain-text endpoints."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.api.routes_greetings import router as greetings_router

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    logger.info("Server shutting down...")


app = FastAPI(
    title="Greeting Responder",
    description="Serves fixed plain-text greetings.",
    version="1.0.0",
    lifespan=lifespan,
    # Only the greeting routes are served; everything else is not found
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

app.include_router(greetings_router)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Answer a wrong method on a known path the same as an unknown path."""
    if exc.status_code == 405:
        return JSONResponse(status_code=404, content={"detail": "Not Found"})
    return await http_exception_handler(request, exc)
