from typing import Generic, Type, TypeVar

from loguru import logger
from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.orm import Session

from ..database.base import Base

ModelType = TypeVar("ModelType", bound=Base)


def equals_ignore_case(column: ColumnElement[str], value: str) -> ColumnElement[bool]:
    """Compare a text column to a value, upper-casing both sides in the database."""
    return func.upper(column) == func.upper(value)


class ReadRepository(Generic[ModelType]):
    """Base repository for read-only lookups of one model."""

    def __init__(self, model: Type[ModelType], session: Session):
        """Initialize repository.

        Args:
            model: The SQLAlchemy model class
            session: Database session
        """
        self.model = model
        self.session = session

    def get_single(self, stmt: Select) -> ModelType | None:
        """Execute a statement expected to match at most one row.

        Raises:
            ValueError: If more than one row matches.
        """
        records = list(self.session.execute(stmt).scalars().all())
        if len(records) > 1:
            logger.error(
                "Expected at most one {} but found {}", self.model.__name__, len(records)
            )
            raise ValueError(f"Multiple {self.model.__name__} records found for a unique lookup")
        return records[0] if records else None

    def count(self, **filters) -> int:
        """Count rows matching column equality filters.

        Raises:
            ValueError: If a filter names a column the model does not have.
        """
        stmt = select(func.count()).select_from(self.model)
        for key, value in filters.items():
            if key not in self.model.__table__.columns:
                raise ValueError(f"Unknown filter field: {key}")
            stmt = stmt.where(self.model.__table__.columns[key] == value)
        return self.session.execute(stmt).scalar_one()
