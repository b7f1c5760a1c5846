"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Swappable components; tests run with the in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base of every blog provider.

    Attributes:
        __mock_component__: Name of the swappable component this provider
            implements, None for providers with a single implementation
        __is_mock__: True for test implementations
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
