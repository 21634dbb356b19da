"""
Session manager for the Neulion API.

Every remote call goes through SessionManager.execute(), which connects
and authenticates on demand so callers never have to.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional

from ..errors import AuthenticationError, NeulionConnectionError, NeulionError, RemoteCallError
from ..transport import SoapTransport
from .token_cache import TokenCache
from ...config import NeulionConfig

logger = logging.getLogger(__name__)

# Marker replaced by the live auth token right before a call is dispatched
TOKEN_PLACEHOLDER = "{{authCode}}"


class SessionState(str, Enum):
    """Connection/auth state of a SessionManager."""

    DISCONNECTED = "disconnected"
    CONNECTED_UNAUTHENTICATED = "connected_unauthenticated"
    AUTHENTICATED = "authenticated"
    EXPIRED = "expired"


def bind_token(params: Any, token: str) -> Any:
    """
    Return a copy of ``params`` with every token placeholder filled in.

    Strings get substring replacement; mappings, lists and tuples are walked
    recursively. Anything else is returned untouched.
    """
    if isinstance(params, str):
        return params.replace(TOKEN_PLACEHOLDER, token)
    if isinstance(params, Mapping):
        return {key: bind_token(value, token) for key, value in params.items()}
    if isinstance(params, list):
        return [bind_token(item, token) for item in params]
    if isinstance(params, tuple):
        return tuple(bind_token(item, token) for item in params)
    return params


class SessionManager:
    """
    Owns the transport connection and the cached auth token.

    There is no lock around the connect/authenticate decision. Two
    concurrent calls that both find no token will both authenticate; the
    last token written wins and both calls complete.
    """

    def __init__(
        self,
        config: NeulionConfig,
        transport: SoapTransport,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize session manager.

        Args:
            config: Endpoint, credentials, group and token TTL
            transport: SOAP transport used for every remote call
            clock: Monotonic time source, injectable for tests
        """
        self.config = config
        self.transport = transport
        self.connection: Optional[Any] = None
        # Replaced handles may still carry in-flight calls; released on close()
        self._retired: List[Any] = []
        self.token_cache = TokenCache(config.auth_cache_ttl, clock=clock)

    @property
    def auth_token(self) -> Optional[str]:
        return self.token_cache.token

    @property
    def auth_token_issued_at(self) -> Optional[float]:
        return self.token_cache.issued_at

    @property
    def state(self) -> SessionState:
        if self.connection is None:
            return SessionState.DISCONNECTED
        if self.token_cache.token is None:
            return SessionState.CONNECTED_UNAUTHENTICATED
        if self.token_cache.is_expired():
            return SessionState.EXPIRED
        return SessionState.AUTHENTICATED

    async def connect(self, endpoint: Optional[str] = None) -> Any:
        """
        Connect to the SOAP endpoint.

        Args:
            endpoint: Overrides the configured endpoint for this connection

        Returns:
            Transport connection handle

        Raises:
            NeulionConnectionError: Endpoint unreachable; state is unchanged
        """
        uri = endpoint or self.config.endpoint
        logger.debug(f"[connect] endpoint={uri}")

        try:
            connection = await self.transport.connect(uri)
        except Exception as e:
            logger.debug(f"[connect] error: {e}")
            raise NeulionConnectionError(original_cause=e) from e

        previous = self.connection
        self.connection = connection
        self.token_cache.clear()
        if previous is not None and previous is not connection:
            self._retired.append(previous)

        logger.debug("[connect] connected")
        return connection

    async def authenticate(
        self, username: Optional[str] = None, password: Optional[str] = None
    ) -> str:
        """
        Authenticate and cache the returned token.

        Connects first when there is no connection yet. Supplied credentials
        replace the configured ones for every later call.

        Returns:
            Non-empty auth token

        Raises:
            NeulionConnectionError: Implicit connect failed
            AuthenticationError: Rejected credentials or failed auth call
        """
        if self.connection is None:
            await self.connect()

        if username:
            self.config.username = username
        if password:
            self.config.password = password

        params = {"loginId": self.config.username, "password": self.config.password}
        logger.debug(f"[auth] authenticating loginId={self.config.username}")

        try:
            response = await self.transport.invoke(self.connection, "authenticate", params)
        except Exception as e:
            logger.debug(f"[auth] err={e}")
            self.token_cache.clear()
            raise AuthenticationError(original_cause=e) from e

        token = self._extract_token(response)
        if not token:
            self.token_cache.clear()
            raise AuthenticationError("Authentication returned no token")

        self.token_cache.store(token)
        logger.debug("[auth] token acquired")
        return token

    # Shorter alias kept for callers of the original client API
    auth = authenticate

    async def execute(self, operation: str, params: Any = None) -> Any:
        """
        Dispatch a remote operation, connecting/authenticating as needed.

        Args:
            operation: Remote operation name (e.g. ``getCategories``)
            params: Operation parameters; TOKEN_PLACEHOLDER is bound to the
                current token just before dispatch

        Returns:
            Raw response from the transport

        Raises:
            NeulionConnectionError: Implicit connect failed
            AuthenticationError: Implicit (re-)authentication failed
            RemoteCallError: The operation itself failed; the token is kept
        """
        if self.connection is None:
            await self.connect()
            await self.authenticate()
        elif self.token_cache.token is None:
            await self.authenticate()
        elif self.token_cache.is_expired():
            logger.debug(f"[execute] token expired after {self.token_cache.age():.0f}s, refreshing")
            await self.authenticate()

        bound = bind_token(params, self.token_cache.token)

        try:
            return await self.transport.invoke(self.connection, operation, bound)
        except NeulionError:
            raise
        except Exception as e:
            logger.debug(f"[{operation}] err={e}")
            raise RemoteCallError(original_cause=e) from e

    async def close(self) -> None:
        """Release the connection, any replaced ones, and forget the token."""
        connections = self._retired + ([self.connection] if self.connection is not None else [])
        self.connection = None
        self._retired = []
        self.token_cache.clear()
        for connection in connections:
            await self._release(connection)

    async def _release(self, connection: Any) -> None:
        try:
            await self.transport.close(connection)
        except Exception as e:
            logger.warning(f"Failed to close SOAP connection: {e}")

    @staticmethod
    def _extract_token(response: Any) -> Optional[str]:
        """Pull the token out of an authenticate response."""
        if isinstance(response, Mapping):
            response = response.get("authenticateReturn", response)
        if isinstance(response, Mapping):
            response = response.get("$value", response.get("_value_1"))
        if response is None or isinstance(response, Mapping):
            return None
        return str(response)
