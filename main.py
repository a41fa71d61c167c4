"""DiveBuddy API - Main Application."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from config import get_settings
from chat import router as chat_router
from learn import router as learn_router

logger = structlog.get_logger()
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("starting_divebuddy_api", environment=settings.environment)
    yield
    logger.info("shutting_down_divebuddy_api")


app = FastAPI(
    title="DiveBuddy API",
    version="0.1.0",
    description="Backend API for the DiveBuddy dive-training assistant",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(chat_router, prefix="/api/chat", tags=["Chat"])
app.include_router(learn_router, prefix="/api/learn", tags=["Learn"])


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "divebuddy-backend"}


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "DiveBuddy API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
        "chat": "/api/chat",
        "learn": "/api/learn"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
