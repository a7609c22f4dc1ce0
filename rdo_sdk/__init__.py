"""
rdo_sdk — random.org JSON-RPC client for Python
Convenience exports for the most common client APIs.
"""

from .version import __version__  # noqa: F401

# Core config & errors
from .config import ClientConfig, DEFAULT_CONFIG, PLACEHOLDER_API_KEY  # noqa: F401
from .errors import RdoSdkError, RpcError, ValidationError, JsonRpcCode  # noqa: F401

# Transport
from .rpc.http import RpcClient  # noqa: F401

# Replies
from .types.reply import (  # noqa: F401
    Success,
    Failure,
    Rejected,
    UsageResult,
    RandomResult,
    VerificationResult,
    StoredResult,
)

# Client & helpers
from .client import RandomOrgClient  # noqa: F401
from .extract import pull_data  # noqa: F401

__all__ = [
    "__version__",
    # Core
    "ClientConfig", "DEFAULT_CONFIG", "PLACEHOLDER_API_KEY",
    "RdoSdkError", "RpcError", "ValidationError", "JsonRpcCode",
    # Transport
    "RpcClient",
    # Replies
    "Success", "Failure", "Rejected",
    "UsageResult", "RandomResult", "VerificationResult", "StoredResult",
    # Client
    "RandomOrgClient", "pull_data",
]
