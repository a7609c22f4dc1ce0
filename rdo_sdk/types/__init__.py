"""
rdo_sdk.types
-------------

Wire shapes (TypedDict) and reply variants returned by `RandomOrgClient`.
"""

from __future__ import annotations

from .reply import (  # noqa: F401
    ErrorShape,
    Failure,
    RandomData,
    RandomResult,
    Rejected,
    Reply,
    RequestDict,
    ResponseDict,
    StoredResult,
    Success,
    UsageResult,
    VerificationResult,
    parse_reply,
)

__all__ = [
    "ErrorShape",
    "Failure",
    "RandomData",
    "RandomResult",
    "Rejected",
    "Reply",
    "RequestDict",
    "ResponseDict",
    "StoredResult",
    "Success",
    "UsageResult",
    "VerificationResult",
    "parse_reply",
]
