# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pywlan.lib.types import VendorPrivacyPayload
from pywlan.security.enums import EncryptionCipher, PmfMode, SaeMethod, SecurityKind
from pywlan.security.exceptions import UnencodableProfileError
from pywlan.security.profile import SecurityProfile, SecurityProfileEdits


def _passphrase(profile: SecurityProfile) -> str:
    return profile.passphrase if profile.passphrase is not None else ""


def _encode_sae(profile: SecurityProfile) -> VendorPrivacyPayload:
    # On the wire, SAE transition mode is pmfMode "capable".
    pmf = profile.protected_management_frames
    if profile.transition_mode:
        pmf = PmfMode.CAPABLE
    elif pmf in (PmfMode.UNSPECIFIED, PmfMode.CAPABLE):
        pmf = PmfMode.REQUIRED
    cipher = EncryptionCipher.TKIP_AES if profile.encryption_cipher is EncryptionCipher.TKIP_AES else EncryptionCipher.AES
    method = profile.sae_method or SaeMethod.HASH_TO_ELEMENT
    return {
        "type": "WPA2/3-SAE" if profile.transition_mode else "WPA3-SAE",
        "WpaSaeElement": {
            "pmfMode": pmf.to_vendor(),
            "saeMethod": method.to_vendor(),
            "presharedKey": _passphrase(profile),
            "keyHexEncoded": False,
            "encryption": cipher.to_vendor(),
            "akmSuiteSelector": "SAE",
        },
    }


def _encode_psk(profile: SecurityProfile) -> VendorPrivacyPayload:
    if profile.transition_mode:
        mode = "WPA2/3"
    elif profile.encryption_cipher is EncryptionCipher.TKIP:
        mode = "WPA"
    else:
        mode = "WPA2"
    pmf = profile.protected_management_frames.to_vendor() or "disabled"
    return {
        "type": mode,
        "WpaPskElement": {
            "mode": mode,
            "pmfMode": pmf,
            "presharedKey": _passphrase(profile),
            "keyHexEncoded": False,
            "encryption": profile.encryption_cipher.to_vendor(),
        },
    }


def _encode_enterprise(profile: SecurityProfile) -> VendorPrivacyPayload:
    wpa3 = profile.is_wpa3_enterprise
    if profile.transition_mode:
        mode = "WPA2/3"
    elif wpa3:
        mode = "WPA3"
    elif profile.encryption_cipher is EncryptionCipher.TKIP:
        mode = "WPA"
    else:
        mode = "WPA2"
    pmf = profile.protected_management_frames
    if pmf is PmfMode.UNSPECIFIED:
        pmf = PmfMode.REQUIRED if wpa3 else PmfMode.DISABLED
    element: dict[str, Any] = {
        "mode": mode,
        "pmfMode": pmf.to_vendor(),
        "encryption": profile.encryption_cipher.to_vendor(),
        "fastTransitionEnabled": bool(profile.fast_transition_enabled),
    }
    if profile.fast_transition_domain_id is not None:
        element["fastTransitionMdId"] = profile.fast_transition_domain_id
    return {"type": mode, "WpaEnterpriseElement": element}


def _encode_owe(profile: SecurityProfile) -> VendorPrivacyPayload:
    element: dict[str, Any] = {"encryption": EncryptionCipher.AES.to_vendor()}
    if profile.owe_companion_ssid:
        element["oweCompanion"] = profile.owe_companion_ssid
    return {"type": "OWE", "OweElement": element}


def _encode_open(profile: SecurityProfile) -> VendorPrivacyPayload:
    return {"type": "Open"}


def _refuse(profile: SecurityProfile) -> VendorPrivacyPayload:
    raise UnencodableProfileError(profile.kind, profile.label)


ENCODERS: dict[SecurityKind, Callable[[SecurityProfile], VendorPrivacyPayload]] = {
    SecurityKind.WPA_SAE:         _encode_sae,
    SecurityKind.WPA_PSK:         _encode_psk,
    SecurityKind.WPA_ENTERPRISE:  _encode_enterprise,
    SecurityKind.OWE:             _encode_owe,
    SecurityKind.OPEN:            _encode_open,
    SecurityKind.SECURED_UNKNOWN: _refuse,
}


class SecurityProfileEncoder:
    """
    Turn a canonical :class:`SecurityProfile` back into the controller's
    privacy payload fragment.

    The output always carries a ``type`` tag, Open included, so an explicitly
    open service can be told apart from one that was never classified. The
    passphrase is passed through untouched; checking it is the validator's job.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    def encode(self, profile: SecurityProfile, edits: SecurityProfileEdits | None = None) -> VendorPrivacyPayload:
        """
        Encode ``profile``, optionally after applying user ``edits``.

        Raises:
            UnencodableProfileError: the (edited) profile is ``SecuredUnknown``.
        """
        if edits is not None:
            profile = profile.apply_edits(edits)
        payload = ENCODERS[profile.kind](profile)
        self.logger.debug("Encoded %s profile as privacy type '%s'", profile.kind.value, payload.get("type"))
        return payload

    def encode_service(self, service: Mapping[str, Any], profile: SecurityProfile,
                       edits: SecurityProfileEdits | None = None) -> dict[str, Any]:
        """
        Return a copy of ``service`` whose ``privacy`` is the encoded profile.
        """
        payload = dict(service)
        payload["privacy"] = self.encode(profile, edits)
        return payload


_DEFAULT_ENCODER = SecurityProfileEncoder()


def encode(profile: SecurityProfile, edits: SecurityProfileEdits | None = None) -> VendorPrivacyPayload:
    return _DEFAULT_ENCODER.encode(profile, edits)
