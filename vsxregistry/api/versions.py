import dotenv
from loguru import logger

from ..database import SessionManager, get_session_manager
from ..models import ExtensionVersion
from ..repositories import ExtensionRepository, ExtensionVersionRepository, NamespaceRepository

dotenv.load_dotenv()

NOT_FOUND = "not_found"


def serialize_version(extension_version: ExtensionVersion) -> dict:
    """Convert an extension version to its JSON representation."""
    extension = extension_version.extension
    return {
        "namespace": extension.namespace.name,
        "name": extension.name,
        "version": extension_version.version,
        "preview": extension_version.preview,
        "timestamp": extension_version.timestamp.isoformat() if extension_version.timestamp else None,
        "displayName": extension_version.display_name,
        "description": extension_version.description,
        "license": extension_version.license,
        "repository": extension_version.repository,
    }


async def get_extension_version(
        namespace: str,
        extension: str,
        version: str,
        session_manager: SessionManager | None = None,
    ) -> dict:
    """Look up one version of an extension.

    Args:
        namespace (str): Namespace name, matched ignoring case.
        extension (str): Extension name, matched ignoring case.
        version (str): Version string, matched exactly.
        session_manager (SessionManager): Defaults to the process-wide one.

    Returns:
        dict: Status envelope holding the serialized version.
    """
    logger.info("Version lookup invoked for {}.{}@{}", namespace, extension, version)
    session_manager = session_manager or get_session_manager()

    try:
        with session_manager.session() as session:
            repo = ExtensionVersionRepository(session)
            found = repo.find_version_by_names(version, extension, namespace)
            if found is None:
                logger.info("Extension version not found: {}.{}@{}", namespace, extension, version)
                return {
                    "status": "error",
                    "error": NOT_FOUND,
                    "message": f"Extension not found: {namespace}.{extension} version {version}",
                }
            return {"status": "success", "version": serialize_version(found)}
    except Exception as e:
        logger.error("Version lookup failed: {}", e)
        return {"status": "error", "error": str(e)}


async def list_extension_versions(
        namespace: str,
        extension: str,
        session_manager: SessionManager | None = None,
    ) -> dict:
    """List all versions of an extension, newest first."""
    logger.info("Version listing invoked for {}.{}", namespace, extension)
    session_manager = session_manager or get_session_manager()

    try:
        with session_manager.session() as session:
            found = ExtensionRepository(session).get_by_name_and_namespace(extension, namespace)
            if found is None:
                if NamespaceRepository(session).get_by_name(namespace) is None:
                    message = f"Namespace not found: {namespace}"
                else:
                    message = f"Extension not found: {namespace}.{extension}"
                logger.info("{}", message)
                return {"status": "error", "error": NOT_FOUND, "message": message}

            versions = ExtensionVersionRepository(session).list_versions_for_extension(found)
            ordered = sorted(versions, key=lambda v: v.timestamp, reverse=True)
            return {
                "status": "success",
                "namespace": found.namespace.name,
                "name": found.name,
                "versions": [serialize_version(v) for v in ordered],
            }
    except Exception as e:
        logger.error("Version listing failed: {}", e)
        return {"status": "error", "error": str(e)}
