"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One API operation: validates its request and returns an envelope."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
