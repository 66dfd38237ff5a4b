from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

if TYPE_CHECKING:
    from .namespace import Namespace
    from .extension_version import ExtensionVersion

from ..config import SettingsManager
from ..database.base import Base

_settings = SettingsManager.get_instance()


class Extension(Base):
    """Publishable extension, unique by name within its namespace."""

    __tablename__ = _settings.storage.table_name_extensions
    __table_args__ = (
        UniqueConstraint("namespace_id", "name"),
    )

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)

    # Foreign key to Namespace
    namespace_id: Mapped[int] = mapped_column(
        Integer, ForeignKey(f"{_settings.storage.table_name_namespaces}.id"), nullable=False, index=True
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Relationships
    namespace: Mapped["Namespace"] = relationship(
        "Namespace",
        foreign_keys=[namespace_id],
        back_populates="extensions",
    )
    versions: Mapped[list["ExtensionVersion"]] = relationship(
        "ExtensionVersion",
        back_populates="extension",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Extension(id='{self.id}', namespace_id='{self.namespace_id}', name='{self.name}')>"
