"""Permissive bound coercion.

Bounds arriving as text are coerced from their leading numeric prefix, the
way a loose numeric cast would: ``"12abc"`` becomes ``12`` and ``"abc"``
becomes ``0``. Integers saturate at the ``int8`` limits and floats that
are not finite become ``0.0``. Coercion never fails; ordering is the only
thing a range rejects. Empty text and ``None`` mean "no bound".
"""

import math
import re
from decimal import Decimal
from typing import Any

from pgranges.util import INT8_MAX, INT8_MIN

# Optional whitespace, sign, digits with optional fraction, optional exponent
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_number(text: str) -> str | None:
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return None
    return match.group(1)


def _as_text(raw: Any) -> str:
    if isinstance(raw, bytes):
        return raw.decode("latin-1")
    return str(raw)


def _saturate(value: int) -> int:
    return max(INT8_MIN, min(INT8_MAX, value))


def to_int(raw: Any) -> int | None:
    """Coerce a raw bound to a 64-bit integer, truncating toward zero.

    Non-numeric text and non-finite values coerce to ``0``. Results outside
    the ``int8`` range saturate at its limits.

    >>> to_int("42")
    42
    >>> to_int("1.9")
    1
    >>> to_int("abc")
    0
    >>> to_int("") is None
    True
    """
    if raw is None or raw == "" or raw == b"":
        return None
    if isinstance(raw, int):  # bool included
        return _saturate(int(raw))
    if isinstance(raw, float):
        return _saturate(int(raw)) if math.isfinite(raw) else 0
    if isinstance(raw, Decimal):
        return _saturate(int(raw)) if raw.is_finite() else 0

    number = _leading_number(_as_text(raw))
    if number is None:
        return 0
    if number.lstrip("+-").isdigit():
        return _saturate(int(number))
    value = float(number)
    return _saturate(int(value)) if math.isfinite(value) else 0


def to_float(raw: Any) -> float | None:
    """Coerce a raw bound to a finite float.

    Non-numeric text and values that do not fit a finite float (``inf``,
    ``nan``, huge integers) coerce to ``0.0``.

    >>> to_float("1.5")
    1.5
    >>> to_float("2e3x")
    2000.0
    >>> to_float("abc")
    0.0
    """
    if raw is None or raw == "" or raw == b"":
        return None
    if isinstance(raw, (int, float, Decimal)):
        try:
            value = float(raw)
        except OverflowError:
            return 0.0
    else:
        number = _leading_number(_as_text(raw))
        if number is None:
            return 0.0
        value = float(number)
    return value if math.isfinite(value) else 0.0
