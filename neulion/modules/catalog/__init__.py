"""
Catalog Module - Black Box Interface

Purpose: Read the VOD catalog
Interface: search()/list(), range(), categories(), details()
Hidden: SOAP operation names, request formatting, response unwrapping

Each call is a single SessionManager.execute() followed by reshaping into
plain records.
"""

from .catalog import CatalogModule
from .models import Category, NeulionJSONEncoder, ProgramDetail
from .parser import as_sequence

__all__ = ["CatalogModule", "Category", "NeulionJSONEncoder", "ProgramDetail", "as_sequence"]
