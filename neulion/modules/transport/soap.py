"""
SOAP transport for the Neulion catalog API.

Wraps zeep's asyncio client so the session layer only ever sees three
coroutines: connect, invoke and close.
"""

import asyncio
import logging
from typing import Any, Mapping, Optional, Protocol, Union

import httpx
import zeep
from zeep.helpers import serialize_object
from zeep.transports import AsyncTransport

logger = logging.getLogger(__name__)

Params = Union[Mapping[str, Any], str, None]


class SoapTransport(Protocol):
    """Protocol for the remote service collaborator."""

    async def connect(self, endpoint: str) -> Any:
        """
        Open a connection to the endpoint.

        Returns:
            Opaque connection handle passed back to invoke/close
        """
        ...

    async def invoke(self, handle: Any, operation: str, params: Params) -> Any:
        """
        Call a named remote operation.

        Returns:
            Response as plain dicts/lists/scalars
        """
        ...

    async def close(self, handle: Any) -> None:
        """Release the connection handle."""
        ...


class ZeepTransport:
    """
    zeep-backed implementation of SoapTransport.

    The WSDL is fetched with a blocking httpx client inside a worker thread;
    operations run on an httpx.AsyncClient.
    """

    def __init__(self, timeout: float = 30.0, verify_ssl: bool = True):
        """
        Initialize transport settings.

        Args:
            timeout: Seconds allowed for WSDL loading and for each operation
            verify_ssl: Verify TLS certificates
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl

    async def connect(self, endpoint: str) -> zeep.AsyncClient:
        logger.debug(f"[connect] loading WSDL from {endpoint}")
        async_client = httpx.AsyncClient(timeout=self.timeout, verify=self.verify_ssl)
        wsdl_client = httpx.Client(timeout=self.timeout, verify=self.verify_ssl)
        transport = AsyncTransport(client=async_client, wsdl_client=wsdl_client)

        try:
            client = await asyncio.to_thread(zeep.AsyncClient, endpoint, transport=transport)
        except Exception:
            # No handle reaches the caller, so nothing else will close these
            wsdl_client.close()
            await async_client.aclose()
            raise

        logger.debug("[connect] WSDL loaded")
        return client

    async def invoke(self, handle: zeep.AsyncClient, operation: str, params: Params) -> Any:
        method = getattr(handle.service, operation)

        if params is None:
            result = await method()
        elif isinstance(params, Mapping):
            result = await method(**params)
        else:
            # Single positional value, bound to the operation's first part
            result = await method(params)

        return serialize_object(result, dict)

    async def close(self, handle: Optional[zeep.AsyncClient]) -> None:
        if handle is None:
            return
        await handle.transport.aclose()
        handle.transport.wsdl_client.close()
