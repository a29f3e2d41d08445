"""
Phrasegen Backend - BIP39 word passphrase service
Passphrases are generated in memory and never stored.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from phrasegen import __version__
from phrasegen.config import settings, validate_settings
from phrasegen.routers import health, passphrases
from phrasegen.middleware.security import SecurityMiddleware
from phrasegen.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    setup_logging(settings.LOG_LEVEL)

    # Fail fast on a broken configuration
    validate_settings(settings)

    yield


def create_app() -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="Phrasegen",
        description="BIP39 word based passphrase generator",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan
    )

    # Rate limiting and no-store headers
    app.add_middleware(SecurityMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(passphrases.router, prefix="/api", tags=["passphrases"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.BACKEND_HOST, port=settings.BACKEND_PORT)
