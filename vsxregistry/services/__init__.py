from .postgresql import get_connection_string

__all__ = [
    "get_connection_string",
]
