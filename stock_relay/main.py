"""Stock Relay - Main Application."""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .logger import logger
from .routers import stock_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Backend server running on http://localhost:{settings.PORT}")
    yield


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="Stock Relay",
        description="Relays the latest TWSE daily trading record for a stock code",
        version=__version__,
        lifespan=lifespan
    )

    # Allow any origin for the frontend (development policy)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(stock_router)

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {
            "status": "ok",
            "provider": settings.TWSE_BASE_URL
        }

    @app.get("/")
    def root():
        """Root endpoint with API info."""
        return {
            "name": "Stock Relay",
            "version": __version__,
            "endpoints": {
                "stock": "/api/stock?code={code}",
                "health": "/health"
            }
        }

    return app


app = create_app()


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
