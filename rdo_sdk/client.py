"""
rdo_sdk.client
==============

Client for the random.org JSON-RPC API:

- getUsage                  → quota of the key (bitsLeft, requestsLeft, ...)
- getResult                 → a stored signed result, by serial number
- verifySignature           → authenticity of a previously signed result
- generate[Signed]Integers, ...IntegerSequences, ...Strings, ...Gaussians,
  ...DecimalFractions, ...UUIDs, ...Blobs → random data

Every call validates its parameters locally first. A call that fails
validation, or whose quota pre-flight (`check=True`) finds too few bits left,
returns a `Rejected` reply and sends nothing. Otherwise the decoded response
is returned as `Success` or `Failure` with the envelope untouched in `.raw`.

Typical usage
-------------
    from rdo_sdk import ClientConfig, RandomOrgClient, pull_data

    with RandomOrgClient(config=ClientConfig(api_key="...")) as rdo:
        reply = rdo.generate_integers(5, max=50, base=16)
        if reply.ok:
            print(pull_data(reply))
        else:
            print(reply)

Design notes
------------
* Basic calls always send the all-zero placeholder key; `signed=True`
  switches to the signed method variant and the configured key.
* `advisoryDelay` is reported on `RandomResult` but never waited on.
* No retries, no caching; one POST per call (two with the pre-flight).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from .config import DEFAULT_CONFIG, ClientConfig
from .rpc import RpcClient, Transport
from .types.reply import Failure, Rejected, Reply, RequestDict, Success, parse_reply
from . import validate as v

logger = logging.getLogger(__name__)

LOW_QUOTA_MESSAGE = "random.org suggests to wait until tomorrow"
NO_KEY_MESSAGE = "Signed requests need an API key"

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"


def _signed_method(basic: str) -> str:
    # generateIntegers -> generateSignedIntegers
    return basic.replace("generate", "generateSigned", 1)


class RandomOrgClient:
    """
    random.org JSON-RPC client.

    Parameters
    ----------
    transport : RpcClient | object with ``post(payload) -> dict`` | None
        Where envelopes are sent. Defaults to an `RpcClient` built from
        `config` (owned, and closed by `close()`).
    config : ClientConfig | None
        Endpoint, API key, request id, timeout and pre-flight threshold.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else RpcClient.from_config(self._config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __enter__(self) -> "RandomOrgClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    # ---- Plumbing ------------------------------------------------------------

    def build_request(self, method: str, params: Mapping[str, Any]) -> RequestDict:
        return {
            "jsonrpc": "2.0",
            "method": method,
            "params": dict(params),
            "id": self._config.request_id,
        }

    def _send(self, method: str, params: Mapping[str, Any]) -> Union[Success, Failure]:
        payload = self.build_request(method, params)
        envelope = self._transport.post(payload)
        reply = parse_reply(method, envelope)
        if isinstance(reply, Failure):
            logger.debug("%s failed: code=%s %s", method, reply.error.code, reply.error.message)
        return reply

    def _reject(self, method: str, message: str) -> Rejected:
        logger.debug("%s rejected: %s", method, message)
        return Rejected(method=method, message=message)

    def _generate(
        self,
        basic: str,
        params: Dict[str, Any],
        problem: Optional[str],
        *,
        signed: bool,
        check: bool,
    ) -> Reply:
        method = _signed_method(basic) if signed else basic
        if problem is None and signed and not self._config.has_api_key:
            problem = NO_KEY_MESSAGE
        if problem is not None:
            return self._reject(method, problem)
        if check and not self.check_usage(signed=signed):
            return self._reject(method, LOW_QUOTA_MESSAGE)
        params["apiKey"] = self._config.key_for(signed)
        return self._send(method, params)

    # ---- Usage ---------------------------------------------------------------

    def get_usage(self, *, signed: bool = False) -> Reply:
        """Return the key's quota: a `UsageResult` with bitsLeft/requestsLeft, no random block."""
        return self._send("getUsage", {"apiKey": self._config.key_for(signed)})

    def check_usage(self, minimum_bits: Optional[int] = None, *, signed: bool = False) -> bool:
        """
        True when the key has at least `minimum_bits` bits left
        (default: `config.minimum_bits`, 500).

        A failed getUsage call counts as insufficient quota.
        """
        if minimum_bits is None:
            minimum_bits = self._config.minimum_bits
        reply = self.get_usage(signed=signed)
        if not isinstance(reply, Success):
            logger.warning("usage pre-flight failed: %s", getattr(reply, "error", reply))
            return False
        return reply.result.bits_left >= minimum_bits

    # ---- Stored results & signatures ----------------------------------------

    def get_result(self, serial_number: int) -> Reply:
        """Fetch a stored signed result (kept by random.org for at least 24 hours)."""
        problem = v.check_serial_number(serial_number)
        if problem is None and not self._config.has_api_key:
            problem = NO_KEY_MESSAGE
        if problem:
            return self._reject("getResult", problem)
        return self._send(
            "getResult",
            {"apiKey": self._config.api_key, "serialNumber": serial_number},
        )

    def verify_signature(self, prior: Union[Success, Mapping[str, Any]]) -> Reply:
        """
        Ask random.org whether a previously signed result is authentic.

        `prior` is a signed `Success` (from a generateSigned* call or
        `get_result`) or its raw response dict. Raises KeyError if it lacks
        ``result.random`` or ``result.signature``.
        `Failure` / `Rejected` replies raise through `raise_for_error()`.
        """
        if isinstance(prior, (Failure, Rejected)):
            prior.raise_for_error()
        envelope = prior.raw if isinstance(prior, Success) else prior
        result = envelope["result"]
        params = {"random": result["random"], "signature": result["signature"]}
        return self._send("verifySignature", params)

    # ---- Generators ----------------------------------------------------------

    def generate_integers(
        self,
        n: int = 100,
        *,
        min: int = 1,
        max: int = 20,
        base: int = 10,
        replace: bool = True,
        check: bool = True,
        signed: bool = False,
    ) -> Reply:
        """
        Get `n` random integers on ``[min, max]``.

        Bases 2, 8 and 16 come back as strings, base 10 as numbers.
        """
        params = {"n": n, "min": min, "max": max, "base": base, "replacement": replace}
        problem = v.check_integers(n, min, max, base)
        return self._generate("generateIntegers", params, problem, signed=signed, check=check)

    def generate_integer_sequences(
        self,
        n: int = 10,
        length: v.IntOrList = 10,
        *,
        min: v.IntOrList = 1,
        max: v.IntOrList = 20,
        base: v.IntOrList = 10,
        replace: v.BoolOrList = True,
        check: bool = True,
        signed: bool = False,
    ) -> Reply:
        """
        Get `n` sequences of random integers.

        `length`, `min`, `max`, `base` and `replace` are either one value for
        every sequence or a list with one entry per sequence. The data comes
        back nested: ``result.random.data[i]`` is the i-th sequence.
        """
        params = {
            "n": n,
            "length": length,
            "min": min,
            "max": max,
            "base": base,
            "replacement": replace,
        }
        problem = v.check_integer_sequences(n, length, min, max, base, replace)
        return self._generate("generateIntegerSequences", params, problem, signed=signed, check=check)

    def generate_strings(
        self,
        n: int = 10,
        length: int = 5,
        characters: str = LOWERCASE,
        *,
        replace: bool = True,
        check: bool = True,
        signed: bool = False,
    ) -> Reply:
        """Get `n` random strings of `length` characters drawn from `characters`."""
        params = {"n": n, "length": length, "characters": characters, "replacement": replace}
        problem = v.check_strings(n, length, characters)
        return self._generate("generateStrings", params, problem, signed=signed, check=check)

    def generate_gaussians(
        self,
        n: int = 10,
        mean: float = 0.0,
        stdev: float = 1.0,
        digits: int = 10,
        *,
        check: bool = True,
        signed: bool = False,
    ) -> Reply:
        params = {
            "n": n,
            "mean": mean,
            "standardDeviation": stdev,
            "significantDigits": digits,
        }
        problem = v.check_gaussians(n, mean, stdev, digits)
        return self._generate("generateGaussians", params, problem, signed=signed, check=check)

    def generate_decimal_fractions(
        self,
        n: int = 10,
        digits: int = 10,
        *,
        replace: bool = True,
        check: bool = True,
        signed: bool = False,
    ) -> Reply:
        """Get `n` decimal fractions on [0, 1) with `digits` decimal places."""
        params = {"n": n, "decimalPlaces": digits, "replacement": replace}
        problem = v.check_decimal_fractions(n, digits)
        return self._generate("generateDecimalFractions", params, problem, signed=signed, check=check)

    def generate_uuids(self, n: int = 10, *, check: bool = True, signed: bool = False) -> Reply:
        params = {"n": n}
        problem = v.check_uuids(n)
        return self._generate("generateUUIDs", params, problem, signed=signed, check=check)

    def generate_blobs(
        self,
        n: int = 10,
        size: int = 128,
        *,
        format: str = "base64",
        check: bool = True,
        signed: bool = False,
    ) -> Reply:
        """Get `n` blobs of `size` bits (a multiple of 8), as base64 or hex strings."""
        params = {"n": n, "size": size, "format": format}
        problem = v.check_blobs(n, size, format)
        return self._generate("generateBlobs", params, problem, signed=signed, check=check)


__all__ = ["RandomOrgClient", "LOW_QUOTA_MESSAGE", "NO_KEY_MESSAGE"]
