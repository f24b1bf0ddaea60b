# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import copy

import pytest

from pywlan.security.classifier import classify
from pywlan.security.encoder import ENCODERS, SecurityProfileEncoder, encode
from pywlan.security.enums import EncryptionCipher, PmfMode, SaeMethod, SecurityKind
from pywlan.security.exceptions import SecurityProfileError, UnencodableProfileError
from pywlan.security.profile import SecurityProfile, SecurityProfileEdits


def test_every_kind_has_an_encoder() -> None:
    assert set(ENCODERS) == set(SecurityKind)


def test_sae_payload_shape() -> None:
    payload = encode(SecurityProfile(kind=SecurityKind.WPA_SAE, passphrase="correct-horse"))
    assert payload == {
        "type": "WPA3-SAE",
        "WpaSaeElement": {
            "pmfMode": "required",
            "saeMethod": "SaeH2e",
            "presharedKey": "correct-horse",
            "keyHexEncoded": False,
            "encryption": "AES",
            "akmSuiteSelector": "SAE",
        },
    }


def test_sae_transition_defaults() -> None:
    payload = encode(SecurityProfile(kind=SecurityKind.WPA_SAE, transition_mode=True))
    assert payload["type"] == "WPA2/3-SAE"
    assert payload["WpaSaeElement"]["pmfMode"] == "capable"


@pytest.mark.parametrize(
    "cipher, expected",
    [
        (EncryptionCipher.TKIP, "AES"),
        (EncryptionCipher.UNSPECIFIED, "AES"),
        (EncryptionCipher.AES, "AES"),
        (EncryptionCipher.TKIP_AES, "TKIP_AES"),
    ],
)
def test_sae_forces_aes_unless_tkip_aes(cipher: EncryptionCipher, expected: str) -> None:
    payload = encode(SecurityProfile(kind=SecurityKind.WPA_SAE, encryption_cipher=cipher))
    assert payload["WpaSaeElement"]["encryption"] == expected


@pytest.mark.parametrize(
    "transition, cipher, mode",
    [
        (True,  EncryptionCipher.TKIP_AES, "WPA2/3"),
        (False, EncryptionCipher.AES,      "WPA2"),
        (False, EncryptionCipher.TKIP,     "WPA"),
        (False, EncryptionCipher.UNSPECIFIED, "WPA2"),
    ],
)
def test_psk_mode(transition: bool, cipher: EncryptionCipher, mode: str) -> None:
    payload = encode(SecurityProfile(kind=SecurityKind.WPA_PSK, transition_mode=transition,
                                     encryption_cipher=cipher, passphrase="abcdefgh"))
    assert payload["type"] == mode
    element = payload["WpaPskElement"]
    assert element["mode"] == mode
    assert element["presharedKey"] == "abcdefgh"
    assert element["keyHexEncoded"] is False


def test_psk_defaults() -> None:
    element = encode(SecurityProfile(kind=SecurityKind.WPA_PSK))["WpaPskElement"]
    assert element["pmfMode"] == "disabled"
    assert element["encryption"] == "AES"
    assert element["presharedKey"] == ""


def test_passphrase_passes_through_unchanged() -> None:
    payload = encode(SecurityProfile(kind=SecurityKind.WPA_PSK, passphrase="abc"))
    assert payload["WpaPskElement"]["presharedKey"] == "abc"


def test_enterprise_wpa3_defaults_to_required_pmf() -> None:
    profile = SecurityProfile(kind=SecurityKind.WPA_ENTERPRISE, vendor_mode="wpa3only",
                              encryption_cipher=EncryptionCipher.AES)
    payload = encode(profile)
    assert payload["type"] == "WPA3"
    assert payload["WpaEnterpriseElement"]["pmfMode"] == "required"


def test_enterprise_wpa2_defaults_to_disabled_pmf() -> None:
    payload = encode(SecurityProfile(kind=SecurityKind.WPA_ENTERPRISE, fast_transition_enabled=True,
                                     fast_transition_domain_id=4321))
    assert payload == {
        "type": "WPA2",
        "WpaEnterpriseElement": {
            "mode": "WPA2",
            "pmfMode": "disabled",
            "encryption": "AES",
            "fastTransitionEnabled": True,
            "fastTransitionMdId": 4321,
        },
    }


def test_enterprise_without_domain_omits_it() -> None:
    element = encode(SecurityProfile(kind=SecurityKind.WPA_ENTERPRISE,
                                     transition_mode=True))["WpaEnterpriseElement"]
    assert element["mode"] == "WPA2/3"
    assert element["fastTransitionEnabled"] is False
    assert "fastTransitionMdId" not in element


def test_owe_and_open() -> None:
    assert encode(SecurityProfile(kind=SecurityKind.OWE, owe_companion_ssid="guest")) == {
        "type": "OWE",
        "OweElement": {"encryption": "AES", "oweCompanion": "guest"},
    }
    assert encode(SecurityProfile(kind=SecurityKind.OWE)) == {"type": "OWE", "OweElement": {"encryption": "AES"}}
    assert encode(SecurityProfile(kind=SecurityKind.OPEN)) == {"type": "Open"}


def test_secured_unknown_is_refused() -> None:
    profile = SecurityProfile(kind=SecurityKind.SECURED_UNKNOWN, label="Custom")
    with pytest.raises(UnencodableProfileError) as excinfo:
        encode(profile)
    assert isinstance(excinfo.value, SecurityProfileError)
    assert excinfo.value.kind is SecurityKind.SECURED_UNKNOWN
    assert "Custom" in str(excinfo.value)


def test_edit_to_concrete_kind_makes_unknown_encodable() -> None:
    unknown = classify({"securityType": "Vendor specific"})
    payload = SecurityProfileEncoder().encode(unknown, SecurityProfileEdits(kind=SecurityKind.WPA_PSK,
                                                                            passphrase="abcdefgh"))
    assert payload["type"] == "WPA2"
    assert payload["WpaPskElement"]["presharedKey"] == "abcdefgh"


def test_encode_service_does_not_mutate_input() -> None:
    service = {"serviceName": "Corp", "ssid": "corp", "privacy": {"WpaPskElement": {"mode": "aesOnly"}}}
    snapshot = copy.deepcopy(service)
    updated = SecurityProfileEncoder().encode_service(service, SecurityProfile(kind=SecurityKind.OPEN))
    assert service == snapshot
    assert updated["privacy"] == {"type": "Open"}
    assert updated["ssid"] == "corp"


ROUND_TRIP_PROFILES: list[SecurityProfile] = [
    SecurityProfile(kind=SecurityKind.WPA_SAE, encryption_cipher=EncryptionCipher.AES,
                    protected_management_frames=PmfMode.REQUIRED,
                    sae_method=SaeMethod.HASH_TO_ELEMENT, passphrase="correct-horse"),
    SecurityProfile(kind=SecurityKind.WPA_SAE, transition_mode=True, encryption_cipher=EncryptionCipher.AES,
                    protected_management_frames=PmfMode.CAPABLE,
                    sae_method=SaeMethod.HUNTING_AND_PECKING, passphrase="battery-staple"),
    SecurityProfile(kind=SecurityKind.WPA_PSK, encryption_cipher=EncryptionCipher.AES,
                    protected_management_frames=PmfMode.DISABLED, passphrase="abcdefgh"),
    SecurityProfile(kind=SecurityKind.WPA_PSK, transition_mode=True, encryption_cipher=EncryptionCipher.TKIP_AES,
                    protected_management_frames=PmfMode.CAPABLE, passphrase="abcdefgh"),
    SecurityProfile(kind=SecurityKind.WPA_PSK, encryption_cipher=EncryptionCipher.TKIP,
                    protected_management_frames=PmfMode.DISABLED, passphrase="legacy-key"),
    SecurityProfile(kind=SecurityKind.WPA_ENTERPRISE, encryption_cipher=EncryptionCipher.AES,
                    protected_management_frames=PmfMode.REQUIRED,
                    fast_transition_enabled=True, fast_transition_domain_id=1234),
    SecurityProfile(kind=SecurityKind.WPA_ENTERPRISE, encryption_cipher=EncryptionCipher.AES,
                    protected_management_frames=PmfMode.DISABLED, fast_transition_enabled=False),
    SecurityProfile(kind=SecurityKind.WPA_ENTERPRISE, transition_mode=True, encryption_cipher=EncryptionCipher.AES,
                    protected_management_frames=PmfMode.CAPABLE, fast_transition_enabled=False),
    SecurityProfile(kind=SecurityKind.OWE, encryption_cipher=EncryptionCipher.AES, owe_companion_ssid="guest-open"),
    SecurityProfile(kind=SecurityKind.OPEN),
]


@pytest.mark.parametrize("profile", ROUND_TRIP_PROFILES, ids=lambda p: f"{p.kind.value}")
def test_round_trip_through_service_payload(profile: SecurityProfile) -> None:
    service = SecurityProfileEncoder().encode_service({"serviceName": "Corp", "ssid": "corp"}, profile)
    assert classify(service, include_secrets=True).settings() == profile.settings()


@pytest.mark.parametrize("profile", ROUND_TRIP_PROFILES, ids=lambda p: f"{p.kind.value}")
def test_round_trip_without_secrets(profile: SecurityProfile) -> None:
    service = {"privacy": encode(profile)}
    decoded = classify(service)
    assert decoded.passphrase is None
    assert decoded.settings(include_passphrase=False) == profile.settings(include_passphrase=False)


def test_sae_transition_is_written_as_capable_pmf() -> None:
    profile = SecurityProfile(kind=SecurityKind.WPA_SAE, transition_mode=True,
                              protected_management_frames=PmfMode.REQUIRED)
    assert encode(profile)["WpaSaeElement"]["pmfMode"] == "capable"

    leaving = SecurityProfile(kind=SecurityKind.WPA_SAE, protected_management_frames=PmfMode.CAPABLE)
    assert encode(leaving)["WpaSaeElement"]["pmfMode"] == "required"


@pytest.mark.parametrize(
    "pmf, edits",
    [
        ("required", SecurityProfileEdits(transition_mode=True)),
        ("capable", SecurityProfileEdits(transition_mode=False)),
        ("required", SecurityProfileEdits(protected_management_frames=PmfMode.CAPABLE)),
        ("capable", SecurityProfileEdits(protected_management_frames=PmfMode.REQUIRED)),
        ("required", SecurityProfileEdits(sae_method=SaeMethod.HUNTING_AND_PECKING, passphrase="new-passphrase")),
    ],
)
def test_edited_sae_profile_survives_save_and_reload(pmf: str, edits: SecurityProfileEdits) -> None:
    stored = {"privacy": {"WpaSaeElement": {"pmfMode": pmf, "saeMethod": "SaeH2e",
                                            "encryption": "AES", "presharedKey": "old-passphrase"}}}
    edited = classify(stored, include_secrets=True).apply_edits(edits)

    saved = SecurityProfileEncoder().encode_service({"serviceName": "Corp", "ssid": "corp"}, edited)
    assert classify(saved, include_secrets=True).settings() == edited.settings()


def test_edited_psk_profile_survives_save_and_reload() -> None:
    stored = {"privacy": {"WpaPskElement": {"mode": "aesOnly", "pmfMode": "disabled", "presharedKey": "abcdefgh"}}}
    edited = classify(stored, include_secrets=True).apply_edits(
        SecurityProfileEdits(transition_mode=True, encryption_cipher=EncryptionCipher.TKIP_AES))

    saved = {"privacy": encode(edited)}
    assert classify(saved, include_secrets=True).settings() == edited.settings()
