"""Infrastructure providers.

Implementations are imported here so they are registered as subclasses
of their component base before get_provider looks them up.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
