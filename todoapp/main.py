# todoapp/main.py
"""FastAPI application for the todoapp task backend."""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todoapp.database import create_db_and_tables
from todoapp.exceptions import TaskError
from todoapp.routes.tasks import API_PREFIX
from todoapp.routes.tasks import router as tasks_router

logger = logging.getLogger(__name__)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

ALLOWED_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:5173,http://localhost:8080",
).split(",")


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and create database tables on startup."""
    configure_logging()
    create_db_and_tables()
    yield


app = FastAPI(title="Todo App Task API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["Content-Type"],
)

app.include_router(tasks_router)


@app.exception_handler(TaskError)
async def task_error_handler(request: Request, exc: TaskError) -> JSONResponse:
    """Render service errors as ``{"detail": message}`` with their status."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies and path parameters as 400 instead of 422."""
    logger.warning("Invalid request %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.get(f"{API_PREFIX}/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "todoapp"}


def run() -> None:
    """Serve the app with uvicorn (``todoapp`` console script)."""
    configure_logging()
    uvicorn.run("todoapp.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
