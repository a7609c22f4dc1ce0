"""
Projection helpers over client replies.

`pull_data` is a convenience: it reads, never mutates, and caches nothing.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Dict, List, Mapping, Union

from .types.reply import Failure, Rejected, Success


def _is_number(v: Any) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool)


def _numeric(items: List[Any]) -> Union[List[Any], None]:
    """Copy of `items` when every element is a number (or a list of numbers), else None."""
    if all(_is_number(x) for x in items):
        return list(items)
    if all(isinstance(x, list) and all(_is_number(y) for y in x) for x in items):
        return [list(x) for x in items]
    return None


def pull_data(reply: Union[Success, Failure, Rejected, Mapping[str, Any]]) -> Any:
    """
    Return the generated data of a reply, or the remaining bits for usage replies.

    - ``result.random.data`` of numbers, flat or one level nested (integer
      sequences), comes back as fresh lists of numbers.
    - Strings and mixed content come back as received.
    - Without a ``random`` block (getUsage), ``result.bitsLeft`` is returned.

    Accepts a `Success` or a raw response dict; `Failure` / `Rejected`
    raise through `raise_for_error()`.
    """
    if isinstance(reply, (Failure, Rejected)):
        reply.raise_for_error()
    envelope: Dict[str, Any] = reply.raw if isinstance(reply, Success) else dict(reply)

    result = envelope["result"]
    if "random" not in result:
        return result["bitsLeft"]

    data = result["random"]["data"]
    numeric = _numeric(data)
    return data if numeric is None else numeric


__all__ = ["pull_data"]
