from abc import ABC, abstractmethod
from typing import Any

from assetlens.core.exceptions import AppError
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)


class BaseService(ABC):
    """Base class for application services.

    Provides a standardized execution flow with validation and error handling.
    """

    def __init__(self):
        self.logger = LOGGER

    async def execute(self, *args, **kwargs) -> Any:
        """Execute the service logic.

        This template method handles:
        1. Input validation
        2. Core logic execution
        3. Standardized error handling

        Raises:
            AppError: If execution fails
        """
        try:
            self.validate(*args, **kwargs)

            return await self.run(*args, **kwargs)

        except AppError:
            raise

        except Exception as e:
            self.logger.error(
                f"Service execution failed: {str(e)}",
                exc_info=True,
                extra={"service": self.__class__.__name__},
            )
            raise AppError(f"Service execution failed: {str(e)}", original_error=e) from e

    def validate(self, *args, **kwargs):
        """Validate service input.

        Override this method to implement custom validation logic.

        Raises:
            ValidationError: If input is invalid
        """
        pass

    @abstractmethod
    async def run(self, *args, **kwargs) -> Any:
        """Run the core service logic."""
        pass
