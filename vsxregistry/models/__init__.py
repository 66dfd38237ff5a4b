from .namespace import Namespace
from .extension import Extension
from .extension_version import ExtensionVersion

__all__ = [
    "Namespace",
    "Extension",
    "ExtensionVersion",
]
