"""
SDK configuration: service endpoint, API key, request id and timeouts.

- Immutable: a `ClientConfig` is built once and injected into the client.
- Provides helpers for building HTTP headers and validating the endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict

from .version import user_agent as _default_user_agent

DEFAULT_ENDPOINT = "https://api.random.org/json-rpc/2/invoke"

# Sent as `apiKey` on every "basic" (unsigned) call.
PLACEHOLDER_API_KEY = "00000000-0000-0000-0000-000000000000"

DEFAULT_REQUEST_ID = 22407
DEFAULT_MINIMUM_BITS = 500


def _ensure_scheme(url: str, allowed: tuple[str, ...]) -> str:
    lower = (url or "").lower()
    if not any(lower.startswith(f"{sch}://") for sch in allowed):
        raise ValueError(f"URL must start with {allowed}, got: {url!r}")
    return url


@dataclass(slots=True, frozen=True)
class ClientConfig:
    # Core
    endpoint: str = DEFAULT_ENDPOINT
    api_key: str = PLACEHOLDER_API_KEY
    request_id: int = DEFAULT_REQUEST_ID
    # HTTP behavior
    timeout: float = 30.0
    # Quota pre-flight
    minimum_bits: int = DEFAULT_MINIMUM_BITS
    # Headers / identity
    user_agent: str = field(default_factory=_default_user_agent)

    def __post_init__(self) -> None:
        _ensure_scheme(self.endpoint, ("http", "https"))
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        if self.minimum_bits < 0:
            raise ValueError("minimum_bits must be >= 0")

    @property
    def has_api_key(self) -> bool:
        """True once a caller key (anything but the all-zero placeholder) is configured."""
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY

    def key_for(self, signed: bool) -> str:
        return self.api_key if signed else PLACEHOLDER_API_KEY

    def with_overrides(self, **overrides: Any) -> "ClientConfig":
        """
        Build a new config from this one plus keyword overrides.
        Unknown keys are ignored.
        """
        data = self.to_dict()
        known = {k: v for k, v in overrides.items() if k in data}
        return replace(self, **known)

    def http_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "endpoint": self.endpoint,
            "api_key": self.api_key,
            "request_id": int(self.request_id),
            "timeout": float(self.timeout),
            "minimum_bits": int(self.minimum_bits),
            "user_agent": self.user_agent,
        }

    def __repr__(self) -> str:
        masked = "<placeholder>" if not self.has_api_key else self.api_key[:4] + "…"
        return (
            f"ClientConfig(endpoint={self.endpoint!r}, api_key={masked!r}, "
            f"request_id={self.request_id}, timeout={self.timeout})"
        )


DEFAULT_CONFIG = ClientConfig()

__all__ = [
    "ClientConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_ENDPOINT",
    "DEFAULT_REQUEST_ID",
    "DEFAULT_MINIMUM_BITS",
    "PLACEHOLDER_API_KEY",
]
