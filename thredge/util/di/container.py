"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from thredge.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Returns:
        DI container with the production implementation of every component
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to a FastAPI application."""
    setup_dishka(container, app)
