"""
Shared pytest fixtures for Neulion tests.

This module provides common fixtures including:
- FakeSoapTransport: In-memory SOAP transport with canned responses
- SuspendingSoapTransport: Same, but yields on every call
- FakeClock: Manually advanced monotonic clock for TTL tests
- Ready-made configs, session managers and catalog modules
"""

import asyncio
import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from neulion.config import NeulionConfig
from neulion.modules.catalog import CatalogModule
from neulion.modules.session import SessionManager


# =============================================================================
# SOAP Transport Mocking Infrastructure
# =============================================================================

@dataclass
class SoapCall:
    """Record of a transport call made during testing."""
    operation: str
    params: Any
    handle: Any = None


class FakeConnection:
    """Opaque connection handle returned by FakeSoapTransport."""

    def __init__(self, endpoint: str, number: int):
        self.endpoint = endpoint
        self.number = number

    def __repr__(self) -> str:
        return f"FakeConnection({self.endpoint!r}, #{self.number})"


Responder = Union[Any, Callable[[Any], Any], BaseException]


class FakeSoapTransport:
    """
    In-memory stand-in for the zeep transport.

    Default responses mirror an empty catalog and a successful login.

    Usage:
        def test_categories(fake_transport):
            fake_transport.register("getCategories", {"ArrayOfCategory": ...})
            ...
            assert fake_transport.operations() == ["authenticate", "getCategories"]
    """

    def __init__(self):
        self.connects: List[str] = []
        self.closed: List[FakeConnection] = []
        self.calls: List[SoapCall] = []
        self.connect_error: Optional[BaseException] = None
        self._tokens = iter(f"token-{n}" for n in range(1, 1000))
        self._responses: Dict[str, Responder] = {
            "searchVodPrograms": {"ArrayOfInteger": {"ArrayOfInteger": []}},
            "getCategories": {"ArrayOfCategory": {"ArrayOfCategory": []}},
            "getProgramDetail": {"ProgramDetail": {"categoryIdArray": {"categoryIdArray": []}}},
        }

    def register(self, operation: str, response: Responder) -> "FakeSoapTransport":
        """
        Register the response for an operation.

        A callable is called with the bound params; an exception instance
        is raised.
        """
        self._responses[operation] = response
        return self

    def operations(self) -> List[str]:
        return [call.operation for call in self.calls]

    def calls_to(self, operation: str) -> List[SoapCall]:
        return [call for call in self.calls if call.operation == operation]

    async def connect(self, endpoint: str) -> FakeConnection:
        if self.connect_error is not None:
            raise self.connect_error
        self.connects.append(endpoint)
        return FakeConnection(endpoint, len(self.connects))

    async def invoke(self, handle: Any, operation: str, params: Any) -> Any:
        self.calls.append(SoapCall(operation, params, handle))

        if operation == "authenticate" and operation not in self._responses:
            return {"authenticateReturn": next(self._tokens)}

        response = self._responses.get(operation)
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return response(params)
        return response

    async def close(self, handle: Any) -> None:
        self.closed.append(handle)


class SuspendingSoapTransport(FakeSoapTransport):
    """
    FakeSoapTransport that yields to the event loop on every call.

    Lets concurrent callers interleave the way a network transport would.
    Invoking on a handle that was already closed raises, as httpx does.
    """

    async def connect(self, endpoint: str) -> FakeConnection:
        await asyncio.sleep(0)
        return await super().connect(endpoint)

    async def invoke(self, handle: Any, operation: str, params: Any) -> Any:
        await asyncio.sleep(0)
        if handle in self.closed:
            raise RuntimeError(f"{handle!r} has been closed")
        return await super().invoke(handle, operation, params)


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_transport():
    """Fresh fake SOAP transport."""
    return FakeSoapTransport()


@pytest.fixture
def suspending_transport():
    """Fake SOAP transport whose calls interleave."""
    return SuspendingSoapTransport()


@pytest.fixture
def clock():
    """Manually advanced clock."""
    return FakeClock()


@pytest.fixture
def config():
    """Test configuration with a one hour token TTL."""
    return NeulionConfig(
        endpoint="https://neulion.example.com/services/vod?wsdl",
        username="api-user",
        password="api-secret",
        group_id=42,
        auth_cache_ttl=3600,
    )


@pytest.fixture
def session_manager(config, fake_transport, clock):
    """SessionManager wired to the fake transport and clock."""
    return SessionManager(config, fake_transport, clock=clock)


@pytest.fixture
def catalog(session_manager):
    """CatalogModule on top of the test session manager."""
    return CatalogModule(session_manager)
