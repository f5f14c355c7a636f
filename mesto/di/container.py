# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    CardProvider,
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)

USE_CASE_PROVIDERS = (AuthProvider, UserProvider, CardProvider)


class DIContainer(BaseContainer):
    """
    Application container backed by MongoDB.

    Providers run in dependency order: collections first, then the
    repositories built on them, then the use case factories.
    """

    def __init__(self) -> None:
        super().__init__()
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        register_use_cases(self)


def register_use_cases(container: BaseContainer) -> None:
    """
    Register every use case factory on ``container``.

    Only needs ``UserRepository`` and ``CardRepository`` to be resolvable,
    which lets tests wire in-memory repositories instead of Mongo.
    """
    for provider in USE_CASE_PROVIDERS:
        provider.register(container)


_container: DIContainer | None = None


def get_container() -> DIContainer:
    """Return the process-wide container, building it on first use"""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    global _container
    _container = None
