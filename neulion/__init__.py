"""
Neulion - VOD catalog API client

An asynchronous client for the Neulion SOAP video-catalog API.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- errors: Error taxonomy shared by all modules
- transport: SOAP connection and operation dispatch
- session: Connection state, auth token caching, auto-reconnect
- catalog: Search, date ranges, categories, program details
"""

from .client import NeulionClient
from .config import NeulionConfig
from .modules.errors import (
    AuthenticationError,
    ErrorKind,
    NeulionConnectionError,
    NeulionError,
    RemoteCallError,
)

__version__ = "1.0.0"

__all__ = [
    "AuthenticationError",
    "ErrorKind",
    "NeulionClient",
    "NeulionConfig",
    "NeulionConnectionError",
    "NeulionError",
    "RemoteCallError",
]
