"""
Dependency Injection Container.

Builds every component from the settings object created once at startup.
Tests swap providers with ``container.<provider>.override(...)``.
"""

from dependency_injector import containers, providers

from .config import settings as app_settings
from .services.instagram_service import InstagramGraphAPIService
from .services.forwarding_service import EventForwardingService
from .use_cases.relay_comment import RelayCommentUseCase


class Container(containers.DeclarativeContainer):
    """
    Application DI container.

    HTTP services are singletons so their aiohttp sessions are shared across
    requests and closed once at shutdown.
    """

    settings = providers.Object(app_settings)

    instagram_service = providers.Singleton(
        InstagramGraphAPIService,
        access_token=settings.provided.instagram.access_token,
        base_url=settings.provided.instagram.base_url,
        timeout_seconds=settings.provided.http_timeout_seconds,
    )

    forwarding_service = providers.Singleton(
        EventForwardingService,
        webhook_url=settings.provided.forwarding.webhook_url,
        timeout_seconds=settings.provided.http_timeout_seconds,
    )

    # Use Cases - Factory (new instance per request)
    relay_comment_use_case = providers.Factory(
        RelayCommentUseCase,
        instagram_service=instagram_service,
        forwarding_service=forwarding_service,
    )


# Global container instance
container = Container()


def get_container() -> Container:
    """
    Get the global container instance.

    Used as a FastAPI dependency:
        container: Container = Depends(get_container)
    """
    return container


async def shutdown_container() -> None:
    """Close HTTP sessions held by singleton services."""
    await container.instagram_service().close()
    await container.forwarding_service().close()


def reset_container():
    """
    Reset container for testing.

    Clears all singletons and allows fresh initialization.
    """
    container.reset_singletons()
