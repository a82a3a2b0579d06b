"""
Tolerant scalar types for the UniFi controller's JSON.

The controller encodes the same field differently across firmware versions
and endpoints: numbers arrive as JSON numbers or strings, booleans as
``true``, ``1``, ``"yes"``, ``"armed"`` and so on. :class:`FlexInt` and
:class:`FlexBool` keep the canonical value next to the original text so
records decode the same way regardless of the spelling.
"""

import json
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from .exceptions import UnifiDecodeError

RawJSON = Union[bytes, bytearray, str]

TRUTHY_TOKENS = frozenset(
    ["1", "true", "yes", "t", "armed", "active", "enabled", "ready", "up", "ok"]
)


def _as_bytes(raw: RawJSON) -> bytes:
    if isinstance(raw, str):
        return raw.encode("utf-8")
    return bytes(raw)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def format_float(value: float) -> str:
    """
    Render a float in its shortest round-trip decimal form.

    No exponent and no trailing zeros: ``42.0`` -> ``"42"``,
    ``3.5`` -> ``"3.5"``, ``1e21`` -> ``"1000000000000000000000"``.
    """
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_float(text: str) -> float:
    """Best-effort float parse. Anything unparseable is 0."""
    # float() tolerates padding and digit separators, the controller's
    # number format does not.
    if not text or text.strip() != text or "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


@dataclass(frozen=True)
class FlexInt:
    """
    A numeric field that may be a JSON number, a JSON string or null.

    Attributes:
        val: Canonical numeric value.
        txt: Original text. Numbers are re-rendered, strings kept verbatim,
             null becomes ``"0"``.
    """
    val: float = 0.0
    txt: str = "0"

    @classmethod
    def unmarshal_json(cls, raw: RawJSON) -> "FlexInt":
        """
        Decode one raw JSON value.

        Args:
            raw: The JSON text of a single field value.

        Returns:
            The decoded FlexInt.

        Raises:
            UnifiDecodeError: If the value is not valid JSON, or is an
                object, array or boolean.
        """
        raw_bytes = _as_bytes(raw)
        try:
            # Integers parse as floats so -0 keeps its sign.
            value = json.loads(
                raw_bytes, parse_int=float, parse_constant=_reject_constant
            )
        except ValueError as e:
            raise UnifiDecodeError(
                f"cannot unmarshal to FlexInt: {raw_bytes!r}", raw_bytes
            ) from e

        return cls.from_value(value, raw_bytes)

    @classmethod
    def from_value(cls, value: Any, raw: Optional[bytes] = None) -> "FlexInt":
        """
        Build a FlexInt from a value already produced by ``json.loads``.

        Raises:
            UnifiDecodeError: If the value is an object, array, boolean or a
                number outside the float range.
        """
        if isinstance(value, str):
            return cls(parse_float(value), value)

        if value is None:
            return cls(0.0, "0")

        # bool is an int subclass and must not pass as a number.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                number = float(value)
            except OverflowError:
                number = math.inf
            if math.isfinite(number):
                return cls(number, format_float(number))

        if raw is None:
            raw = json.dumps(value, default=str).encode("utf-8")
        raise UnifiDecodeError(f"cannot unmarshal to FlexInt: {raw!r}", raw)

    def __str__(self) -> str:
        return self.txt

    def __int__(self) -> int:
        return int(self.val)

    def __float__(self) -> float:
        return self.val


@dataclass(frozen=True)
class FlexBool:
    """
    A boolean field spelled any of several ways.

    ``val`` is True when ``txt`` is one of 1, true, yes, t, armed, active,
    enabled, ready, up or ok, compared case-insensitively. Anything else,
    including malformed input, is False. Decoding never fails.

    Attributes:
        val: Canonical boolean value.
        txt: Original token with surrounding quotes removed.
    """
    val: bool = False
    txt: str = ""

    @classmethod
    def from_text(cls, text: str) -> "FlexBool":
        return cls(text.lower() in TRUTHY_TOKENS, text)

    @classmethod
    def unmarshal_json(cls, raw: RawJSON) -> "FlexBool":
        """Decode one raw JSON value. Strips one layer of double quotes."""
        if isinstance(raw, str):
            text = raw
        else:
            text = bytes(raw).decode("utf-8", errors="replace")

        if text.startswith('"'):
            text = text[1:]
        if text.endswith('"'):
            text = text[:-1]

        return cls.from_text(text)

    @classmethod
    def from_value(cls, value: Any) -> "FlexBool":
        """Build a FlexBool from a value already produced by ``json.loads``."""
        if isinstance(value, str):
            return cls.from_text(value)
        return cls.from_text(json.dumps(value, default=str))

    def __str__(self) -> str:
        return self.txt

    def __bool__(self) -> bool:
        return self.val
