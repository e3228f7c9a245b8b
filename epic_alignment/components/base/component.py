from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from pydantic import BaseModel

from .exceptions import ComponentError, UnhandledError
from .logging import get_logger

TRequest = TypeVar("TRequest", bound=BaseModel)
TResponse = TypeVar("TResponse", bound=BaseModel)

logger = get_logger(__name__)


class BaseComponent(ABC, Generic[TRequest, TResponse]):
    """Abstract base for all components.

    Each component implements this interface, providing:
    - component_name: Unique identifier for logging and error payloads
    - process(): Main async entry point

    Calling the component runs process() and translates anything that is not
    already a ComponentError into an UnhandledError.
    """

    @property
    @abstractmethod
    def component_name(self) -> str:
        """Unique identifier for this component."""
        pass

    @abstractmethod
    async def process(self, request: TRequest) -> TResponse:
        """Main processing entry point."""
        pass

    async def __call__(self, request: TRequest) -> TResponse:
        """Allow component to be called directly."""
        try:
            return await self.process(request)
        except ComponentError:
            raise
        except Exception as e:
            logger.exception("[%s] unhandled error", self.component_name)
            raise UnhandledError(str(e), component=self.component_name) from e
