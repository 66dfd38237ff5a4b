from typing import Literal

import dotenv
from loguru import logger

from ..config import SettingsManager
from ..database import SessionManager, get_session_manager, verify_schema

dotenv.load_dotenv()


async def health(
        route: Literal['postgres'] | None = None,
        session_manager: SessionManager | None = None,
    ) -> dict:
    """Health check function.

    Without a route only the settings are validated. The 'postgres' route
    also checks that the registry tables can be inspected.
    """
    logger.info("Health check invoked (route={})", route)

    errors = SettingsManager.get_instance().validate()
    if errors:
        logger.error("Settings validation errors: {}", errors)
        return {"status": "error", "errors": errors}

    if route is None:
        return {"status": "success"}

    if route.strip().lower() != "postgres":
        logger.warning("Unknown health check route: {}", route)
        return {"status": "error", "error": f"Unknown route: {route}"}

    try:
        verification = verify_schema(session_manager or get_session_manager())
    except Exception as e:
        logger.error("Database health check failed: {}", e)
        return {"status": "error", "postgres": "disconnected", "error": str(e)}

    if verification["status"] == "error":
        return {"status": "error", "postgres": "disconnected", "error": verification["error"]}
    return {"status": "success", "postgres": f"connected (schema {verification['status']})"}
