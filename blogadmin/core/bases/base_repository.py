from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar, Union
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from pydantic import BaseModel

T = TypeVar("T", bound=SQLModel)


class RepositoryError(Exception):
    """Custom exception for repository errors."""

    pass


class DuplicateEntryError(RepositoryError):
    """A write violated a unique constraint."""

    pass


class BaseRepository(Generic[T]):
    model: Type[T]

    def __init__(self, get_session: Callable[..., Any]):
        self.get_session = get_session

    def _handle_db_error(self, error: SQLAlchemyError, operation: str) -> None:
        """Handle database errors and raise appropriate exceptions."""
        if isinstance(error, IntegrityError):
            raise DuplicateEntryError(
                f"Database integrity error during {operation}: {error}"
            ) from error
        else:
            raise RepositoryError(
                f"Database error during {operation}: {error}"
            ) from error

    def _build_select_stmt(self, **filters) -> Any:
        """Build select statement with optional equality filters."""
        stmt = select(self.model)

        for field, value in filters.items():
            if hasattr(self.model, field):
                stmt = stmt.where(getattr(self.model, field) == value)

        return stmt

    @staticmethod
    def _to_dict(obj_in: Union[Dict[str, Any], BaseModel]) -> Dict[str, Any]:
        if isinstance(obj_in, BaseModel):
            return obj_in.model_dump(exclude_unset=True)
        return dict(obj_in)

    # ----------------- READ ----------------- #
    async def get_one(self, **filters) -> Optional[T]:
        """Get a single item matching the filters."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(**filters)
                result = await db.exec(stmt)
                return result.first()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_one")

    async def get_many(self, *, skip: int = 0, limit: int = 100, **filters) -> List[T]:  # type:ignore
        """Get multiple items with filtering and pagination."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(**filters).offset(skip).limit(limit)
                result = await db.exec(stmt)
                return list(result.all())
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_many")

    # ----------------- WRITE ----------------- #
    async def create(self, obj_in: Union[Dict[str, Any], BaseModel]) -> T:  # type:ignore
        """Create a new item."""
        data = self._to_dict(obj_in)

        async with self.get_session() as db:
            try:
                obj = self.model(**data)  # type: ignore
                db.add(obj)
                await db.commit()
                await db.refresh(obj)
                return obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "create")

    async def update_one(
        self, obj_in: Union[Dict[str, Any], BaseModel], **filters
    ) -> Optional[T]:
        """Update the single item matching the filters.

        Returns None without writing when nothing matches.
        """
        update_data = self._to_dict(obj_in)

        # Primary key never changes through an update
        update_data.pop("id", None)

        if not update_data:
            raise RepositoryError("No data provided for update")
        if not filters:
            raise RepositoryError("update_one requires at least one filter")

        async with self.get_session() as db:
            try:
                result = await db.exec(self._build_select_stmt(**filters))
                db_obj = result.first()
                if not db_obj:
                    return None

                for key, value in update_data.items():
                    if hasattr(db_obj, key):
                        setattr(db_obj, key, value)

                db.add(db_obj)
                await db.commit()
                await db.refresh(db_obj)
                return db_obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "update")
