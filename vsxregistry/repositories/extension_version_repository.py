"""Read-only lookups over published extension versions.

Version strings are always compared exactly. Extension and namespace names
are compared ignoring case, upper-casing both sides in the database so the
stored value and the argument go through the same case mapping.
"""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.engine import ScalarResult
from sqlalchemy.orm import Session

from ..models import Extension, ExtensionVersion, Namespace
from .base import ReadRepository, equals_ignore_case


class ExtensionVersionRepository(ReadRepository[ExtensionVersion]):
    """Repository for ExtensionVersion lookups."""

    def __init__(self, session: Session):
        super().__init__(ExtensionVersion, session)

    def list_versions_for_extension(self, extension: Extension) -> ScalarResult[ExtensionVersion]:
        """Get all versions of an extension.

        The result is consumed lazily and yields nothing for an extension
        without versions. Order is not defined.
        """
        stmt = select(ExtensionVersion).where(
            ExtensionVersion.extension_id == extension.id
        )
        return self.session.scalars(stmt)

    def find_version_exact(self, version: str, extension: Extension) -> ExtensionVersion | None:
        """Get the version of an extension with exactly this version string.

        Raises:
            ValueError: If the stored data holds the same version twice.
        """
        stmt = select(ExtensionVersion).where(
            ExtensionVersion.version == version,
            ExtensionVersion.extension_id == extension.id,
        )
        result = self.get_single(stmt)
        if result is None:
            logger.debug("No version {} for extension id={}", version, extension.id)
        return result

    def find_version_by_names(
        self,
        version: str,
        extension_name: str,
        namespace_name: str,
    ) -> ExtensionVersion | None:
        """Get a version by its version string, extension name and namespace name.

        Raises:
            ValueError: If the stored data holds the same version twice.
        """
        stmt = (
            select(ExtensionVersion)
            .join(ExtensionVersion.extension)
            .join(Extension.namespace)
            .where(
                ExtensionVersion.version == version,
                equals_ignore_case(Extension.name, extension_name),
                equals_ignore_case(Namespace.name, namespace_name),
            )
        )
        result = self.get_single(stmt)
        if result is None:
            logger.debug("No version {} for {}.{}", version, namespace_name, extension_name)
        return result
