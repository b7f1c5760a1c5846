"""Dependency injection wiring.

PROVIDERS lists every provider from the bottom layer up. A provider that
has subclasses is a swappable component; its production and mock
implementations are told apart by ``__is_mock__``.
"""

from typing import Type

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ProdConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    PersistenceProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock implementation of a swappable component

    Returns:
        base itself when it has no implementations, otherwise the matching one

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} provider for component '{base.__mock_component__}'")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
