"""Configuration provider following Black Box Design principles."""
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_AUTH_CACHE_TTL = 60 * 60  # 1 hour


@dataclass
class NeulionConfig:
    """
    Connection settings for the Neulion API.

    Only username and password change after construction, and only through
    SessionManager.authenticate().
    """
    endpoint: str
    username: str = ""
    password: str = field(default="", repr=False)
    group_id: Optional[int] = None
    auth_cache_ttl: float = DEFAULT_AUTH_CACHE_TTL

    def __post_init__(self):
        if not self.endpoint:
            raise ValueError("Neulion endpoint is required")
        if self.group_id is not None:
            self.group_id = int(self.group_id)
        self.auth_cache_ttl = float(self.auth_cache_ttl)
        if self.auth_cache_ttl <= 0:
            raise ValueError("auth_cache_ttl must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NeulionConfig":
        """
        Build a config from a plain mapping.

        Accepts both snake_case keys and the camelCase keys used by
        ~/.neulionrc files (``group``, ``groupId``, ``authCacheTTL``).
        """
        group_id = data.get("group_id", data.get("groupId", data.get("group")))
        ttl = data.get("auth_cache_ttl", data.get("authCacheTTL", DEFAULT_AUTH_CACHE_TTL))
        return cls(
            endpoint=data.get("endpoint", ""),
            username=data.get("username", ""),
            password=data.get("password", ""),
            group_id=group_id,
            auth_cache_ttl=ttl,
        )


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_config(self) -> NeulionConfig:
        """Get Neulion configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_config(self) -> NeulionConfig:
        """Get Neulion configuration from environment variables."""
        endpoint = os.getenv("NEULION_ENDPOINT")
        if not endpoint:
            raise ValueError(
                "NEULION_ENDPOINT environment variable is required. "
                "Example: https://api.example.com/services/vod?wsdl"
            )

        return NeulionConfig(
            endpoint=endpoint,
            username=os.getenv("NEULION_USERNAME", ""),
            password=os.getenv("NEULION_PASSWORD", ""),
            group_id=os.getenv("NEULION_GROUP_ID") or None,
            auth_cache_ttl=float(os.getenv("NEULION_AUTH_CACHE_TTL", str(DEFAULT_AUTH_CACHE_TTL))),
        )


class FileConfigProvider:
    """JSON file configuration provider (config.json, then ~/.neulionrc)."""

    def __init__(self, paths: Optional[List[Path]] = None):
        """
        Args:
            paths: Candidate files in lookup order; first readable one wins
        """
        if paths is None:
            paths = [Path.cwd() / "config.json", Path.home() / ".neulionrc"]
        self.paths = [Path(p) for p in paths]

    def _read(self, path: Path) -> Optional[Dict[str, Any]]:
        if not path.is_file():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {path}: {e}")
            return None
        if not isinstance(data, dict):
            logger.error(f"Ignoring {path}: expected a JSON object")
            return None
        return data

    def get_config(self) -> NeulionConfig:
        """Get Neulion configuration from the first usable file."""
        for path in self.paths:
            data = self._read(path)
            if data is not None:
                logger.debug(f"Loaded configuration from {path}")
                return NeulionConfig.from_dict(data)

        searched = ", ".join(str(p) for p in self.paths)
        raise ValueError(f"No Neulion configuration file found (searched: {searched})")


def load_config(path: Optional[str] = None) -> NeulionConfig:
    """
    Resolve configuration for command-line use.

    An explicit path must exist. Otherwise the default files are tried and
    the environment is the fallback.
    """
    if path:
        return FileConfigProvider([Path(path)]).get_config()

    try:
        return FileConfigProvider().get_config()
    except ValueError:
        return EnvConfigProvider().get_config()
