from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

if TYPE_CHECKING:
    from .extension import Extension

from ..config import SettingsManager
from ..database.base import Base

_settings = SettingsManager.get_instance()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExtensionVersion(Base):
    """One published version of an extension.

    The version string is stored as published (case preserved) and is unique
    per extension.
    """

    __tablename__ = _settings.storage.table_name_extension_versions
    __table_args__ = (
        UniqueConstraint("extension_id", "version"),
    )

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)

    # Foreign key to Extension
    extension_id: Mapped[int] = mapped_column(
        Integer, ForeignKey(f"{_settings.storage.table_name_extensions}.id"), nullable=False, index=True
    )

    version: Mapped[str] = mapped_column(String(100), nullable=False)
    preview: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    license: Mapped[str | None] = mapped_column(String(255), nullable=True)
    repository: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # Relationships
    extension: Mapped["Extension"] = relationship(
        "Extension",
        foreign_keys=[extension_id],
        back_populates="versions",
    )

    def __repr__(self) -> str:
        return f"<ExtensionVersion(id='{self.id}', extension_id='{self.extension_id}', version='{self.version}')>"
