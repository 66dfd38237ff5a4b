import json
import sys

import azure.functions as func
from loguru import logger

from vsxregistry.api import (
    NOT_FOUND,
    health as health_handler,
    setup as setup_handler,
    get_extension_version as get_extension_version_handler,
    list_extension_versions as list_extension_versions_handler,
)
from vsxregistry.config import SettingsManager
from vsxregistry.database import SessionManager, get_session_manager, init_session_manager


app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

logger.remove()
logger.add(sys.stderr, level=SettingsManager.get_instance().application.log_level.upper())


def _session_manager() -> SessionManager:
    """Process-wide session manager, created on the first request that needs it."""
    try:
        return get_session_manager()
    except RuntimeError:
        return init_session_manager()


def _status_code(response: dict) -> int:
    if response.get("status") == "success":
        return 200
    if response.get("error") == NOT_FOUND:
        return 404
    return 500


def _json_response(response: dict) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(response),
        status_code=_status_code(response),
        mimetype="application/json",
    )


async def handle_extension_versions(req: func.HttpRequest) -> func.HttpResponse:
    response = await list_extension_versions_handler(
        namespace=req.route_params.get("namespace"),
        extension=req.route_params.get("extension"),
        session_manager=_session_manager(),
    )
    return _json_response(response)


async def handle_extension_version(req: func.HttpRequest) -> func.HttpResponse:
    response = await get_extension_version_handler(
        namespace=req.route_params.get("namespace"),
        extension=req.route_params.get("extension"),
        version=req.route_params.get("version"),
        session_manager=_session_manager(),
    )
    return _json_response(response)


@app.function_name(name="ping")
@app.route(route="ping", methods=[func.HttpMethod.GET])
async def ping(req: func.HttpRequest) -> func.HttpResponse:
    """Ping endpoint."""
    logger.info("HTTP trigger: ping")
    return func.HttpResponse("pong", status_code=200)


@app.function_name(name="health")
@app.route(route="health", methods=[func.HttpMethod.GET])
async def health(req: func.HttpRequest) -> func.HttpResponse:
    """Health check."""
    logger.info("HTTP trigger: health")
    route = req.params.get("route", None)
    response = await health_handler(
        route=route,
        session_manager=_session_manager() if route else None,
    )
    return _json_response(response)


@app.function_name(name="setup")
@app.route(route="setup", methods=[func.HttpMethod.POST])
async def setup(req: func.HttpRequest) -> func.HttpResponse:
    """Create missing tables."""
    logger.info("HTTP trigger: setup")
    response = await setup_handler(session_manager=_session_manager())
    return _json_response(response)


@app.function_name(name="extension_versions")
@app.route(route="api/{namespace}/{extension}", methods=[func.HttpMethod.GET])
async def extension_versions(req: func.HttpRequest) -> func.HttpResponse:
    """List the versions of an extension."""
    logger.info("HTTP trigger: extension_versions")
    return await handle_extension_versions(req)


@app.function_name(name="extension_version")
@app.route(route="api/{namespace}/{extension}/{version}", methods=[func.HttpMethod.GET])
async def extension_version(req: func.HttpRequest) -> func.HttpResponse:
    """Get one version of an extension."""
    logger.info("HTTP trigger: extension_version")
    return await handle_extension_version(req)
