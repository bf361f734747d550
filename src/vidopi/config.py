"""Configuration helpers for the Vidopi client."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.vidopi.com"


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}") from exc


def normalize_base_url(base_url: Optional[str]) -> str:
    """Return ``base_url`` (or the production endpoint) without trailing slashes."""

    return (base_url or DEFAULT_BASE_URL).rstrip("/")


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable connection settings shared by every call of a client."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError('VidopiClient: "api_key" is required.')
        object.__setattr__(self, "base_url", normalize_base_url(self.base_url))

    @classmethod
    def from_env(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "ClientConfig":
        """Build a config from ``VIDOPI_*`` variables, explicit arguments first."""

        return cls(
            api_key=api_key or os.getenv("VIDOPI_API_KEY", ""),
            base_url=base_url or os.getenv("VIDOPI_BASE_URL", DEFAULT_BASE_URL),
            timeout=timeout if timeout is not None else _env_float("VIDOPI_TIMEOUT"),
        )


__all__ = ["ClientConfig", "DEFAULT_BASE_URL", "normalize_base_url"]
