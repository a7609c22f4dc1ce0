"""
Client-side parameter checks for the random.org generator methods.

Every check returns ``None`` when the parameters are acceptable, or the
human-readable rejection message otherwise. Checks are pure: no I/O, no
state, the same input always yields the same message.

Bounds are the documented service limits for JSON-RPC API release 2.
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, List, Optional, Sequence, Union

MAX_N = 10_000
MAX_UUIDS = 1_000
MAX_BLOBS = 100
MAX_SEQUENCE_TOTAL = 10_000

INT_LIMIT = 1e9
GAUSS_LIMIT = 1e6

MAX_STRING_LENGTH = 32
MAX_CHARACTERS = 128
MAX_BLOB_SIZE = 2 ** 20

BASES = (2, 8, 10, 16)
BLOB_FORMATS = ("base64", "hex")

IntOrList = Union[int, Sequence[int]]
BoolOrList = Union[bool, Sequence[bool]]


def _is_int(v: Any) -> bool:
    return isinstance(v, Integral) and not isinstance(v, bool)


def _is_real(v: Any) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool) and math.isfinite(v)


def check_count(n: Any, upper: int = MAX_N, noun: str = "numbers") -> Optional[str]:
    if not _is_int(n):
        return "n must be an integer"
    if n < 1 or n > upper:
        return f"Requests must be between 1 and {upper:,} {noun}"
    return None


def check_integer_range(lo: Any, hi: Any) -> Optional[str]:
    if not (_is_int(lo) and _is_int(hi)):
        return "min and max must be integers"
    if lo < -INT_LIMIT or hi > INT_LIMIT or lo > hi:
        return "Range must be between -1e9 and 1e9"
    return None


def check_base(base: Any) -> Optional[str]:
    if base not in BASES or isinstance(base, bool):
        return "Base has to be one of 2, 8, 10 or 16"
    return None


def check_integers(n: Any, lo: Any, hi: Any, base: Any) -> Optional[str]:
    return check_count(n) or check_integer_range(lo, hi) or check_base(base)


def _spread(name: str, value: Any, n: int) -> Union[List[Any], str]:
    """Expand a scalar to n copies; a list must already hold n entries."""
    if isinstance(value, (list, tuple)):
        if len(value) != n:
            return f"{name} must have {n} entries when given per sequence"
        return list(value)
    return [value] * n


def check_integer_sequences(
    n: Any,
    length: IntOrList,
    lo: IntOrList,
    hi: IntOrList,
    base: IntOrList,
    replace: BoolOrList,
) -> Optional[str]:
    msg = check_count(n, noun="sequences")
    if msg:
        return msg

    columns = {}
    for name, value in (("length", length), ("min", lo), ("max", hi), ("base", base), ("replacement", replace)):
        col = _spread(name, value, n)
        if isinstance(col, str):
            return col
        columns[name] = col

    lengths = columns["length"]
    if not all(_is_int(x) for x in lengths):
        return "length must be an integer"
    if any(x < 1 for x in lengths) or sum(lengths) > MAX_SEQUENCE_TOTAL:
        return f"Sequence lengths must be at least 1 and total at most {MAX_SEQUENCE_TOTAL:,}"

    for length_i, lo_i, hi_i, base_i, replace_i in zip(
        lengths, columns["min"], columns["max"], columns["base"], columns["replacement"]
    ):
        msg = check_integer_range(lo_i, hi_i) or check_base(base_i)
        if msg:
            return msg
        if not replace_i and length_i > hi_i - lo_i + 1:
            return "Length cannot exceed the range (max - min + 1) without replacement"
    return None


def check_strings(n: Any, length: Any, characters: Any) -> Optional[str]:
    msg = check_count(n, noun="strings")
    if msg:
        return msg
    if not _is_int(length) or length < 1 or length > MAX_STRING_LENGTH:
        return f"Length must be between 1 and {MAX_STRING_LENGTH}"
    if not isinstance(characters, str) or not 1 <= len(characters) <= MAX_CHARACTERS:
        return f"Characters must be a string of 1 to {MAX_CHARACTERS} characters"
    return None


def check_gaussians(n: Any, mean: Any, stdev: Any, digits: Any) -> Optional[str]:
    msg = check_count(n)
    if msg:
        return msg
    if not _is_real(mean) or mean < -GAUSS_LIMIT or mean > GAUSS_LIMIT:
        return "Mean must be between -1e6 and 1e6"
    if not _is_real(stdev) or stdev < -GAUSS_LIMIT or stdev > GAUSS_LIMIT:
        return "Std dev must be between -1e6 and 1e6"
    if not _is_int(digits) or digits < 2 or digits > 14:
        return "Significant digits must be between 2 and 14"
    return None


def check_decimal_fractions(n: Any, digits: Any) -> Optional[str]:
    msg = check_count(n)
    if msg:
        return msg
    if not _is_int(digits) or digits < 1 or digits > 14:
        return "Decimal places must be between 1 and 14"
    return None


def check_uuids(n: Any) -> Optional[str]:
    return check_count(n, upper=MAX_UUIDS, noun="UUIDs")


def check_blobs(n: Any, size: Any, fmt: Any) -> Optional[str]:
    msg = check_count(n, upper=MAX_BLOBS, noun="blobs")
    if msg:
        return msg
    if not _is_int(size) or size < 1 or size > MAX_BLOB_SIZE:
        return f"Size must be between 1 and {MAX_BLOB_SIZE}"
    if size % 8 != 0:
        return "Size must be divisible by 8"
    if fmt not in BLOB_FORMATS:
        return "Format must be 'hex' or 'base64'"
    return None


def check_serial_number(serial_number: Any) -> Optional[str]:
    if not _is_int(serial_number):
        return "Serial number must be an integer"
    return None


__all__ = [
    "MAX_N",
    "MAX_UUIDS",
    "MAX_BLOBS",
    "BASES",
    "BLOB_FORMATS",
    "check_count",
    "check_integer_range",
    "check_base",
    "check_integers",
    "check_integer_sequences",
    "check_strings",
    "check_gaussians",
    "check_decimal_fractions",
    "check_uuids",
    "check_blobs",
    "check_serial_number",
]
