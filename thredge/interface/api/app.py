"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thredge.config import Settings
from thredge.interface.api.routes import entries, health, threads
from thredge.util.di.container import create_container, setup_di
from thredge.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production start_app.py does it.

    Args:
        container: DI container to use; the production container if None
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Thredge API",
        description="Threads with nested, reorderable replies",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(entries.router)

    return app_instance


# App instance for uvicorn
app = create_app()
