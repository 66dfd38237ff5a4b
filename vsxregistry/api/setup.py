import dotenv
from loguru import logger

from ..database import SessionManager, get_session_manager, init_database, verify_schema
from ..repositories import ExtensionRepository, ExtensionVersionRepository, NamespaceRepository

dotenv.load_dotenv()


async def setup(session_manager: SessionManager | None = None) -> dict:
    """Create missing registry tables and report how many rows each holds."""
    logger.info("Setup invoked")
    session_manager = session_manager or get_session_manager()

    init_database(session_manager)
    verification = verify_schema(session_manager)
    if verification["status"] != "ok":
        logger.error("Registry schema incomplete after setup: {}", verification)
        return {"status": "error", "verification": verification}

    with session_manager.session() as session:
        counts = {
            "namespaces": NamespaceRepository(session).count(),
            "extensions": ExtensionRepository(session).count(),
            "extension_versions": ExtensionVersionRepository(session).count(),
        }
    logger.info("Registry schema ready: {}", counts)
    return {"status": "success", "verification": verification, "counts": counts}
