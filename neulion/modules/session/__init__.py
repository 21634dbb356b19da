"""
Session Module - Black Box Interface

Purpose: Keep an authenticated connection to the Neulion API
Interface: connect(), authenticate(), execute(), close()
Hidden: Connection handle, token caching and TTL expiry, token binding

Every higher-level call funnels through execute().
"""

from .session import TOKEN_PLACEHOLDER, SessionManager, SessionState, bind_token
from .token_cache import TokenCache

__all__ = ["SessionManager", "SessionState", "TOKEN_PLACEHOLDER", "TokenCache", "bind_token"]
