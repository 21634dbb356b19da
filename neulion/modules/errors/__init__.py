"""
Errors Module - Black Box Interface

Purpose: Single error taxonomy for every failure the client surfaces
Interface: NeulionError (base), ErrorKind, and the kind-specific subclasses
Hidden: SOAP fault unpacking

Callers may catch NeulionError broadly, a subclass specifically, or
switch on ``error.kind``.
"""

from .errors import (
    AuthenticationError,
    ErrorKind,
    NeulionConnectionError,
    NeulionError,
    RemoteCallError,
)

__all__ = [
    "AuthenticationError",
    "ErrorKind",
    "NeulionConnectionError",
    "NeulionError",
    "RemoteCallError",
]
