"""Error types raised by the Neulion client."""

from enum import Enum
from typing import Optional

from zeep.exceptions import Fault


class ErrorKind(str, Enum):
    """What stage of a call failed."""

    CONNECTION = "connection"
    AUTHENTICATION = "authentication"
    REMOTE_CALL = "remote_call"


def _describe(cause: BaseException) -> str:
    """
    Build a readable message from an underlying error.

    SOAP faults otherwise render as an empty string, so the fault string
    reported by the server is used instead.
    """
    if isinstance(cause, Fault):
        return cause.message or str(cause.code or "SOAP fault")
    return str(cause) or type(cause).__name__


class NeulionError(Exception):
    """
    Base error for every failure surfaced by the client.

    Attributes:
        kind: Failure stage
        message: Human readable description
        original_cause: Underlying exception, if any
    """

    default_kind = ErrorKind.REMOTE_CALL

    def __init__(
        self,
        message: Optional[str] = None,
        original_cause: Optional[BaseException] = None,
        kind: Optional[ErrorKind] = None,
    ):
        if message is None and original_cause is not None:
            message = _describe(original_cause)
        self.kind = kind or self.default_kind
        self.message = message or self.kind.value.replace("_", " ")
        self.original_cause = original_cause
        super().__init__(self.message)

    @property
    def fault_code(self) -> Optional[str]:
        """SOAP fault code when the cause was a SOAP fault."""
        if isinstance(self.original_cause, Fault):
            return self.original_cause.code
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class NeulionConnectionError(NeulionError, ConnectionError):
    """The SOAP endpoint could not be reached or its WSDL could not be loaded."""

    default_kind = ErrorKind.CONNECTION


class AuthenticationError(NeulionError):
    """Bad credentials, or the authenticate call itself failed."""

    default_kind = ErrorKind.AUTHENTICATION


class RemoteCallError(NeulionError):
    """A post-authentication operation failed."""

    default_kind = ErrorKind.REMOTE_CALL
