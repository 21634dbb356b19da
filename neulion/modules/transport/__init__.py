"""
Transport Module - Black Box Interface

Purpose: Talk SOAP to the remote video catalog
Interface: connect(endpoint), invoke(handle, operation, params), close(handle)
Hidden: WSDL loading, HTTP client, XML (de)serialization

Replaceable with any RPC transport honoring the SoapTransport protocol.
"""

from .soap import SoapTransport, ZeepTransport

__all__ = ["SoapTransport", "ZeepTransport"]
