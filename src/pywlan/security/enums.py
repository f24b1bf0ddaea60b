# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from typing import Any

from pywlan.lib.types import StringEnum


class SecurityKind(StringEnum):
    """
    Canonical security kind of a wireless service.

    ``SECURED_UNKNOWN`` is a first-class value: the record carries some form
    of privacy configuration that could not be mapped to a concrete kind.
    """
    OPEN            = "Open"
    OWE             = "OWE"
    WPA_PSK         = "WPA_PSK"
    WPA_SAE         = "WPA_SAE"
    WPA_ENTERPRISE  = "WPA_Enterprise"
    SECURED_UNKNOWN = "SecuredUnknown"

    @classmethod
    def from_name(cls, name: Any) -> SecurityKind | None:
        """Case-insensitive match against the canonical names."""
        if not isinstance(name, str):
            return None
        wanted = name.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class EncryptionCipher(StringEnum):
    AES         = "AES"
    TKIP        = "TKIP"
    TKIP_AES    = "TKIP_AES"
    UNSPECIFIED = "Unspecified"

    @classmethod
    def from_vendor(cls, token: Any) -> EncryptionCipher:
        """
        Parse the element ``encryption`` field (``AES``, ``AES_CCM_128``,
        ``TKIP``, ``TKIP_AES``, ``tkip-aes`` ...).
        """
        if not isinstance(token, str):
            return cls.UNSPECIFIED
        t = token.strip().lower().replace("-", "_").replace("/", "_")
        has_tkip = "tkip" in t
        has_aes = "aes" in t or "ccmp" in t
        if has_tkip and has_aes:
            return cls.TKIP_AES
        if has_tkip:
            return cls.TKIP
        if has_aes:
            return cls.AES
        return cls.UNSPECIFIED

    def to_vendor(self) -> str:
        # The controller has no "unspecified" cipher; AES is its default.
        return "AES" if self is EncryptionCipher.UNSPECIFIED else self.value


class PmfMode(StringEnum):
    """802.11w Protected Management Frames mode."""
    REQUIRED    = "Required"
    CAPABLE     = "Capable"
    DISABLED    = "Disabled"
    UNSPECIFIED = "Unspecified"

    @classmethod
    def from_vendor(cls, token: Any) -> PmfMode:
        if not isinstance(token, str):
            return cls.UNSPECIFIED
        t = token.strip().lower()
        if t in ("required", "mandatory"):
            return cls.REQUIRED
        if t in ("capable", "optional", "enabled"):
            return cls.CAPABLE
        if t == "disabled":
            return cls.DISABLED
        return cls.UNSPECIFIED

    def to_vendor(self) -> str | None:
        if self is PmfMode.UNSPECIFIED:
            return None
        return self.value.lower()


class SaeMethod(StringEnum):
    """WPA3 SAE password element derivation."""
    HASH_TO_ELEMENT     = "HashToElement"
    HUNTING_AND_PECKING = "HuntingAndPecking"

    @classmethod
    def from_vendor(cls, token: Any) -> SaeMethod | None:
        if not isinstance(token, str):
            return None
        t = token.strip().lower()
        if "h2e" in t or "hashtoelement" in t:
            return cls.HASH_TO_ELEMENT
        if "hnp" in t or "hunting" in t:
            return cls.HUNTING_AND_PECKING
        return None

    def to_vendor(self) -> str:
        return "SaeH2e" if self is SaeMethod.HASH_TO_ELEMENT else "SaeHnP"
