from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Namespace
from .base import ReadRepository, equals_ignore_case


class NamespaceRepository(ReadRepository[Namespace]):
    """Repository for Namespace lookups."""

    def __init__(self, session: Session):
        super().__init__(Namespace, session)

    def get_by_name(self, name: str) -> Namespace | None:
        """Get namespace by name, ignoring case."""
        stmt = select(Namespace).where(equals_ignore_case(Namespace.name, name))
        return self.get_single(stmt)
