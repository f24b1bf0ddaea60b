# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pywlan.lib.casts import as_number, as_positive, as_str
from pywlan.lib.types import KeyPath

_MISSING = object()


class RawRecordAccessor:
    """
    Order-sensitive field lookup over an untyped controller record.

    The controller reports the same concept under several historical names,
    at the top level or nested under a sub-record. Callers pass the candidate
    key paths in priority order and get back the first *present* value.

    A path is either a dotted string (``"privacy.WpaSaeElement"``) or a tuple
    of keys, which is required when a key itself contains a dot
    (``("privacy", "802.1x")``).

    Presence follows the controller's own convention: ``None``, ``False``,
    ``0``, ``""`` and NaN are absent; everything else, empty mappings
    included, is present.

    The accessor never raises on malformed input: a non-mapping record
    behaves like an empty one.
    """

    __slots__ = ("_record",)

    def __init__(self, record: Any) -> None:
        self._record: Mapping[str, Any] = record if isinstance(record, Mapping) else {}

    @property
    def record(self) -> Mapping[str, Any]:
        return self._record

    @staticmethod
    def split(path: KeyPath) -> tuple[str, ...]:
        if isinstance(path, tuple):
            return path
        return tuple(path.split("."))

    @staticmethod
    def is_present(value: Any) -> bool:
        if value is None or value is False:
            return False
        if isinstance(value, str):
            return value != ""
        if isinstance(value, float):
            return value != 0 and not math.isnan(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return value != 0
        return True

    def get(self, path: KeyPath, default: Any = None) -> Any:
        """
        Return the value stored at ``path`` without any presence test.
        """
        node: Any = self._record
        for key in self.split(path):
            if not isinstance(node, Mapping):
                return default
            node = node.get(key, _MISSING)
            if node is _MISSING:
                return default
        return node

    def has(self, path: KeyPath) -> bool:
        return self.is_present(self.get(path))

    def first_with_path(self, *paths: KeyPath) -> tuple[KeyPath, Any] | None:
        """
        Return ``(path, value)`` for the first present candidate, else ``None``.
        """
        for path in paths:
            value = self.get(path)
            if self.is_present(value):
                return path, value
        return None

    def first(self, *paths: KeyPath, default: Any = None) -> Any:
        hit = self.first_with_path(*paths)
        return hit[1] if hit is not None else default

    def mapping(self, *paths: KeyPath) -> Mapping[str, Any] | None:
        """
        First present candidate that is a mapping (sub-record / element).
        """
        for path in paths:
            value = self.get(path)
            if isinstance(value, Mapping):
                return value
        return None

    def text(self, *paths: KeyPath) -> str | None:
        """
        First present scalar candidate, rendered as a string.
        """
        for path in paths:
            value = self.get(path)
            if not self.is_present(value):
                continue
            text = as_str(value)
            if text is not None:
                return text
        return None

    def number(self, *paths: KeyPath) -> float | None:
        for path in paths:
            x = as_number(self.get(path))
            if x is not None:
                return x
        return None

    def positive(self, *paths: KeyPath) -> float | None:
        """
        First candidate holding a finite number strictly greater than zero.
        """
        for path in paths:
            x = as_positive(self.get(path))
            if x is not None:
                return x
        return None

    def child(self, path: KeyPath) -> RawRecordAccessor:
        """
        Accessor over the sub-record at ``path`` (empty when not a mapping).
        """
        return RawRecordAccessor(self.get(path))
