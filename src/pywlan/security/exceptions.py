# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from pywlan.security.enums import SecurityKind


class SecurityProfileError(Exception):
    """
    Security Profile Handling Failure.

    Base class for errors raised while turning canonical security profiles
    back into controller payloads.
    """


class UnencodableProfileError(SecurityProfileError):
    """
    Raised when a profile cannot be re-encoded into a controller payload.

    A profile that could not be confidently classified must not be submitted;
    the caller has to pick a concrete kind first.
    """

    def __init__(self, kind: SecurityKind, label: str = "") -> None:
        self.kind = kind
        self.label = label
        detail = f" ({label})" if label else ""
        super().__init__(f"Cannot encode security profile of kind {kind.value}{detail}; choose a concrete security type first")
