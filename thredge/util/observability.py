"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Entry moved", entry_id=str(entry.id), order_index=entry.order_index)

    # Manual spans for critical operations
    with logfire.span("entry_service.move_entry", entry_id=str(entry_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from thredge.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN environment variable to enable cloud sending
    - If token is present, logs will be sent to Logfire cloud by default
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "thredge-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
        max_depth=settings.tree.max_depth,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        """Map request attributes, handling both HTTP and WebSocket requests."""
        result = {**attributes}

        # WebSocket requests have no method attribute
        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = request.url.path

        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Traces every query, including the row locks taken while moving entries.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
