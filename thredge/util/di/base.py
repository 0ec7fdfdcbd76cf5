"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component name for swappable components, None otherwise
        __is_mock__: Whether this is the test implementation of its component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
