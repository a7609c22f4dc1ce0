"""
Version helpers for the rdo_sdk package.
We keep a static __version__ (PEP 440); the HTTP client advertises it in the
User-Agent header.
"""

from __future__ import annotations

# Bump this when publishing
__version__ = "0.3.0"


def user_agent() -> str:
    return f"rdo-sdk-python/{__version__}"


__all__ = ["__version__", "user_agent"]
