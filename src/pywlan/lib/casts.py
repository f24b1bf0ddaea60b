# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import math
from typing import Any


def as_number(v: Any) -> float | None:
    """
    Convert A Loosely-Typed Telemetry Value To A Finite Float.

    Controllers report counters and rates as ints, floats or numeric
    strings. Booleans, ``None``, non-numeric strings, NaN and infinities
    are rejected and yield ``None`` so callers can fall back explicitly.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        try:
            x = float(v)
        except OverflowError:
            return None
    elif isinstance(v, str):
        text = v.strip()
        if text == "":
            return None
        try:
            x = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(x) or math.isinf(x):
        return None
    return x


def as_positive(v: Any) -> float | None:
    """
    Return ``v`` As A Float Only When It Is Strictly Greater Than Zero.
    """
    x = as_number(v)
    if x is None or x <= 0:
        return None
    return x


def as_non_negative(v: Any, default: float = 0.0) -> float:
    """
    Coerce ``v`` To A Non-Negative Float, Degrading To ``default``.
    """
    x = as_number(v)
    if x is None or x < 0:
        return default
    return x


def as_int(v: Any) -> int | None:
    """
    Convert A Scalar To Int, Truncating Floats; ``None`` When Not Numeric.
    """
    x = as_number(v)
    return int(x) if x is not None else None


def as_bool(v: Any) -> bool:
    """
    Convert A Scalar Value To Bool With String Awareness.

    ``"false"``, ``"0"``, ``"no"`` and ``"off"`` (any case) are False;
    every other value follows Python's native truthiness.
    """
    if isinstance(v, str):
        return v.strip().lower() not in ("", "false", "0", "no", "off")
    return bool(v)


def as_str(v: Any) -> str | None:
    """
    Render A Scalar As Text; ``None`` And Containers Yield ``None``.
    """
    if v is None or isinstance(v, (dict, list, tuple, set)):
        return None
    if isinstance(v, bool):
        return "true" if v else "false"
    try:
        return str(v)
    except ValueError:
        # int beyond the interpreter's digit limit
        return None
