"""
Neulion client facade.

This is the composition root that:
- Creates the transport, session and catalog modules
- Wires them together via dependency injection
- Exposes the public client API
"""

import logging
import time
from typing import Any, Callable, List, Mapping, Optional

from .config import NeulionConfig
from .modules.catalog import CatalogModule, Category, ProgramDetail
from .modules.session import SessionManager, SessionState
from .modules.transport import SoapTransport, ZeepTransport

logger = logging.getLogger(__name__)


class NeulionClient:
    """
    Asynchronous client for the Neulion VOD catalog.

    Usage:
        async with NeulionClient(config) as api:
            ids = await api.range(start, end)
            detail = await api.details(ids[0])

    Connecting and authenticating happen on first use; connect() and
    authenticate() only need to be called to fail early or to switch
    endpoint/credentials.
    """

    def __init__(
        self,
        config: NeulionConfig,
        transport: Optional[SoapTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        logger.debug(f"[init] using config: {config}")
        self.config = config
        self.session = SessionManager(config, transport or ZeepTransport(), clock=clock)
        self.catalog = CatalogModule(self.session)

    @property
    def state(self) -> SessionState:
        return self.session.state

    async def connect(self, endpoint: Optional[str] = None) -> Any:
        return await self.session.connect(endpoint)

    async def authenticate(
        self, username: Optional[str] = None, password: Optional[str] = None
    ) -> str:
        return await self.session.authenticate(username, password)

    auth = authenticate

    async def search(self, params: Optional[Mapping[str, Any]] = None) -> List[int]:
        return await self.catalog.search(params)

    list = search

    async def range(self, start: Any, end: Any) -> List[int]:
        return await self.catalog.range(start, end)

    async def categories(self) -> List[Category]:
        return await self.catalog.categories()

    async def details(self, program_id: int) -> ProgramDetail:
        return await self.catalog.details(program_id)

    async def close(self) -> None:
        await self.session.close()

    async def __aenter__(self) -> "NeulionClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
