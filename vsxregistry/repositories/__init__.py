from .base import ReadRepository, equals_ignore_case
from .namespace_repository import NamespaceRepository
from .extension_repository import ExtensionRepository
from .extension_version_repository import ExtensionVersionRepository

__all__ = [
    "ReadRepository",
    "equals_ignore_case",
    "NamespaceRepository",
    "ExtensionRepository",
    "ExtensionVersionRepository",
]
