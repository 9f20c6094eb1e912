"""FastAPI application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from palabra import __version__
from palabra.api.routes import close_service, router
from palabra.config import Settings, configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(Settings.from_env().log_level)
    yield
    await close_service()


app = FastAPI(
    title="Palabra",
    description="Spanish Bible reading aid: word translation and verse alignment",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS for development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Palabra",
        "version": __version__,
        "docs": "/docs",
        "api": "/api/v1",
    }
