"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from blog.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every production provider.

    Nothing connects to the database here. The engine is created, warmed
    and instrumented the first time a request needs a session.

    Returns:
        App-scoped async container
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use FromDishka.

    Args:
        app: FastAPI application
        container: DI container (production or test)
    """
    setup_dishka(container, app)
