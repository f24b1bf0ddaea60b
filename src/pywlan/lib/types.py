# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any, NewType, TypeAlias


# Enum String Type
class StringEnum(str, Enum):
    """Py3.10-compatible StrEnum shim."""

    def __str__(self) -> str:
        return str(self.value)

# ────────────────────────────────────────────────────────────────────────────────
# Raw controller records (owned by the caller, never mutated here)
# ────────────────────────────────────────────────────────────────────────────────
RawRecord: TypeAlias            = Mapping[str, Any]
RawServiceRecord: TypeAlias     = RawRecord
RawStationRecord: TypeAlias     = RawRecord
VendorPrivacyPayload: TypeAlias = dict[str, Any]

# Lookup paths: dotted string ("privacy.WpaSaeElement") or explicit key tuple
# for keys that themselves contain a dot (("privacy", "802.1x")).
KeyPath: TypeAlias      = str | tuple[str, ...]

# ────────────────────────────────────────────────────────────────────────────────
# Network identifiers
# ────────────────────────────────────────────────────────────────────────────────
MacAddressStr   = NewType("MacAddressStr", str)
OuiStr          = NewType("OuiStr", str)
VendorName      = NewType("VendorName", str)

# ────────────────────────────────────────────────────────────────────────────────
# Paths / filesystem
# ────────────────────────────────────────────────────────────────────────────────
PathLike    = str | Path
FileNameStr = NewType("FileNameStr", str)
