from .health import health
from .setup import setup
from .versions import NOT_FOUND, get_extension_version, list_extension_versions

__all__ = [
    "health",
    "setup",
    "get_extension_version",
    "list_extension_versions",
    "NOT_FOUND",
]
