# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from pywlan.security.enums import EncryptionCipher, PmfMode, SaeMethod, SecurityKind

# Fields that only carry meaning for a single kind.
_VARIANT_FIELDS: dict[str, SecurityKind] = {
    "sae_method":                SecurityKind.WPA_SAE,
    "fast_transition_enabled":   SecurityKind.WPA_ENTERPRISE,
    "fast_transition_domain_id": SecurityKind.WPA_ENTERPRISE,
    "owe_companion_ssid":        SecurityKind.OWE,
}

# Display-only fields, never part of a round-trip comparison.
_DISPLAY_FIELDS: frozenset[str] = frozenset({"label", "vendor_mode"})

_WPA3_MODES: frozenset[str] = frozenset({"wpa3only", "wpa3"})


class SecurityProfile(BaseModel):
    """
    Canonical security configuration of a wireless service.

    Immutable once built; edits go through :meth:`apply_edits`, which returns
    a new validated instance.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    kind: SecurityKind                                  = Field(..., description="Canonical security kind")
    transition_mode: bool                               = Field(default=False, description="Legacy and modern authentication offered together")
    encryption_cipher: EncryptionCipher                 = Field(default=EncryptionCipher.UNSPECIFIED)
    protected_management_frames: PmfMode                = Field(default=PmfMode.UNSPECIFIED)
    sae_method: SaeMethod | None                        = Field(default=None)
    passphrase: str | None                              = Field(default=None, repr=False)
    fast_transition_enabled: bool | None                = Field(default=None)
    fast_transition_domain_id: int | None               = Field(default=None)
    owe_companion_ssid: str | None                      = Field(default=None)
    label: str                                          = Field(default="", description="Human readable name")
    vendor_mode: str | None                             = Field(default=None, description="Raw vendor mode token, kept verbatim")

    @model_validator(mode="after")
    def _check_variant_fields(self) -> SecurityProfile:
        for name, owner in _VARIANT_FIELDS.items():
            if getattr(self, name) is not None and self.kind is not owner:
                raise ValueError(f"{name} is only valid for kind {owner.value}, not {self.kind.value}")
        return self

    @property
    def is_secured(self) -> bool:
        return self.kind is not SecurityKind.OPEN

    @property
    def is_wpa3_enterprise(self) -> bool:
        if self.kind is not SecurityKind.WPA_ENTERPRISE:
            return False
        if self.protected_management_frames is PmfMode.REQUIRED:
            return True
        return (self.vendor_mode or "").strip().lower() in _WPA3_MODES

    def settings(self, *, include_passphrase: bool = True) -> dict[str, Any]:
        """
        The comparable part of the profile (display fields removed).
        """
        exclude = set(_DISPLAY_FIELDS)
        if not include_passphrase:
            exclude.add("passphrase")
        return self.model_dump(exclude=exclude)

    def apply_edits(self, edits: SecurityProfileEdits) -> SecurityProfile:
        """
        Return a new profile with ``edits`` applied.

        Switching ``kind`` drops the variant fields of the previous kind and
        the vendor mode token. A blank passphrase keeps the current one.
        """
        data = self.model_dump()
        changes = {
            k: v for k, v in edits.model_dump(exclude_unset=True).items()
            if v is not None or k in _VARIANT_FIELDS
        }

        passphrase = changes.pop("passphrase", None)
        if passphrase is not None and passphrase.strip() != "":
            data["passphrase"] = passphrase

        new_kind = changes.get("kind")
        if new_kind is not None and new_kind is not self.kind:
            for name in _VARIANT_FIELDS:
                data[name] = None
            data["vendor_mode"] = None
            data["label"] = ""

        data.update(changes)
        if data["kind"] is SecurityKind.WPA_SAE:
            _sync_sae_transition(data, changes)
        return SecurityProfile.model_validate(data)


def _sync_sae_transition(data: dict[str, Any], changes: dict[str, Any]) -> None:
    """
    Keep SAE transition mode and PMF ``capable`` in step when only one is edited.
    """
    pmf = data["protected_management_frames"]
    if "transition_mode" in changes and "protected_management_frames" not in changes:
        if data["transition_mode"]:
            data["protected_management_frames"] = PmfMode.CAPABLE
        elif pmf is PmfMode.CAPABLE:
            data["protected_management_frames"] = PmfMode.REQUIRED
    elif "protected_management_frames" in changes and "transition_mode" not in changes:
        data["transition_mode"] = pmf is PmfMode.CAPABLE


class SecurityProfileEdits(BaseModel):
    """User edits to a classified profile; unset fields are left alone."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    kind: SecurityKind | None                       = None
    transition_mode: bool | None                    = None
    encryption_cipher: EncryptionCipher | None      = None
    protected_management_frames: PmfMode | None     = None
    sae_method: SaeMethod | None                    = None
    passphrase: str | None                          = Field(default=None, repr=False)
    fast_transition_enabled: bool | None            = None
    fast_transition_domain_id: int | None           = None
    owe_companion_ssid: str | None                  = None
    label: str | None                               = None
