from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, TypeVar

from sqlmodel import SQLModel

from blogadmin.core import exceptions
from blogadmin.core.bases.base_repository import BaseRepository, RepositoryError
from blogadmin.core.logger import logger
from blogadmin.core.response.schemas import ErrorDetail

T = TypeVar("T", bound=SQLModel)


class BaseService(Generic[T]):
    """Base service wrapping a repository with validation hooks."""

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    @property
    def model_name(self) -> str:
        return self.repository.model.__name__

    @contextmanager
    def _repository_errors(self, operation: str) -> Iterator[None]:
        """Translate repository failures into ServiceException."""
        try:
            yield
        except RepositoryError as e:
            logger.error(f"{self.model_name} {operation} failed: {e}")
            raise exceptions.ServiceException(
                detail=f"Could not {operation} {self.model_name.lower()}"
            ) from e

    @staticmethod
    def _error_details(errors: Dict[str, str], code: str = "REQUIRED") -> List[ErrorDetail]:
        return [
            ErrorDetail(field=field, code=code, message=message)
            for field, message in errors.items()
        ]

    async def _validate_update(
        self, item_id: Any, update_data: Dict[str, Any], existing_item: T
    ) -> None:
        """Validate data before update."""
        pass
