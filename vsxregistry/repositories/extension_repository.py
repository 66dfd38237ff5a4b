from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Extension, Namespace
from .base import ReadRepository, equals_ignore_case


class ExtensionRepository(ReadRepository[Extension]):
    """Repository for Extension lookups."""

    def __init__(self, session: Session):
        super().__init__(Extension, session)

    def get_by_name_and_namespace(self, name: str, namespace_name: str) -> Extension | None:
        """Get extension by its name and namespace name, both ignoring case."""
        stmt = (
            select(Extension)
            .join(Extension.namespace)
            .where(
                equals_ignore_case(Extension.name, name),
                equals_ignore_case(Namespace.name, namespace_name),
            )
        )
        return self.get_single(stmt)
