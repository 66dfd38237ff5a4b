from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

if TYPE_CHECKING:
    from .extension import Extension

from ..config import SettingsManager
from ..database.base import Base

_settings = SettingsManager.get_instance()


class Namespace(Base):
    """Naming scope that owns extensions."""

    __tablename__ = _settings.storage.table_name_namespaces

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    # Relationships
    extensions: Mapped[list["Extension"]] = relationship(
        "Extension",
        back_populates="namespace",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Namespace(id='{self.id}', name='{self.name}')>"
