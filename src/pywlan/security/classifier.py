# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

"""
Security profile classification.

A wireless service record returned by the controller describes its privacy
configuration in many different shapes: typed elements at the top level or
under ``privacy``, generic ``mode``/``security.type`` scalars, free-form
``encryption`` strings, or just a passphrase. :class:`SecurityProfileClassifier`
walks an ordered chain of rules and the first rule that recognizes the record
produces the canonical :class:`SecurityProfile`.

The order of the chain is significant: a record can satisfy several rules and
modern mechanisms (SAE, enterprise) are checked before legacy ones.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pywlan.lib.casts import as_bool, as_int
from pywlan.lib.record_accessor import RawRecordAccessor
from pywlan.lib.types import KeyPath, RawServiceRecord
from pywlan.security.enums import EncryptionCipher, PmfMode, SaeMethod, SecurityKind
from pywlan.security.profile import SecurityProfile

SAE_ELEMENT_PATHS: tuple[KeyPath, ...] = (
    "WpaSaeElement",
    "privacy.WpaSaeElement",
    "privacy.wpaSaeElement",
    "privacy.sae",
    "privacy.SAE",
    "WpaSae",
    "privacy.WpaSae",
)
ENTERPRISE_ELEMENT_PATHS: tuple[KeyPath, ...] = ("WpaEnterpriseElement", "privacy.WpaEnterpriseElement")
EAP_ELEMENT_PATHS: tuple[KeyPath, ...] = (
    "WpaEapElement",
    "privacy.WpaEapElement",
    "eapElement",
    "privacy.eapElement",
    "dot1xElement",
    "privacy.dot1xElement",
    ("802.1x",),
    ("privacy", "802.1x"),
)
OWE_ELEMENT_PATHS: tuple[KeyPath, ...] = ("OweElement", "privacy.OweElement")
TYPE_LABEL_PATHS: tuple[KeyPath, ...] = ("security.type", "privacy.type")
SCALAR_LABEL_PATHS: tuple[KeyPath, ...] = ("securityType", "authType", "privacyType")
SECRET_PATHS: tuple[KeyPath, ...] = ("passphrase", "password", "psk")

_ENTERPRISE_KEY_HINTS: tuple[str, ...] = ("enterprise", "eap", "802", "1x", "radius")
_PSK_KEY_HINTS: tuple[str, ...] = ("psk", "passphrase", "key")


@dataclass(frozen=True)
class _ModeSpec:
    cipher: EncryptionCipher | None     # None: take the element's own encryption field
    transition: bool
    generation: str
    suffix: str = ""


# Vendor mode tokens (lowercased). The last four are the tokens this package
# emits when encoding, so encoded payloads classify back to the same settings.
_MODE_TABLE: dict[str, _ModeSpec] = {
    "aesonly":   _ModeSpec(EncryptionCipher.AES,      False, "WPA2",      " (AES)"),
    "tkiponly":  _ModeSpec(EncryptionCipher.TKIP,     False, "WPA",       " (TKIP)"),
    "mixed":     _ModeSpec(EncryptionCipher.TKIP_AES, True,  "WPA/WPA2",  " (Mixed)"),
    "wpa3only":  _ModeSpec(EncryptionCipher.AES,      False, "WPA3"),
    "wpa3mixed": _ModeSpec(EncryptionCipher.AES,      True,  "WPA2/WPA3"),
    "wpa":       _ModeSpec(None,                      False, "WPA"),
    "wpa2":      _ModeSpec(None,                      False, "WPA2"),
    "wpa3":      _ModeSpec(None,                      False, "WPA3"),
    "wpa2/3":    _ModeSpec(None,                      True,  "WPA2/WPA3"),
}


@dataclass(frozen=True)
class _Context:
    record: RawRecordAccessor
    include_secrets: bool


RuleExtractor = Callable[[_Context], SecurityProfile | None]


@dataclass(frozen=True)
class ClassificationRule:
    """A named step of the classification chain."""
    name: str
    extract: RuleExtractor


# ────────────────────────────────────────────────────────────────────────────────
# Element helpers
# ────────────────────────────────────────────────────────────────────────────────
def _element_cipher(element: RawRecordAccessor, default: EncryptionCipher = EncryptionCipher.UNSPECIFIED) -> EncryptionCipher:
    cipher = EncryptionCipher.from_vendor(element.get("encryption"))
    return default if cipher is EncryptionCipher.UNSPECIFIED else cipher


def _element_secret(ctx: _Context, element: RawRecordAccessor) -> str | None:
    if not ctx.include_secrets:
        return None
    value = element.get("presharedKey")
    return value if isinstance(value, str) and value != "" else None


def _fast_transition(element: RawRecordAccessor) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if element.get("fastTransitionEnabled") is not None:
        fields["fast_transition_enabled"] = as_bool(element.get("fastTransitionEnabled"))
    domain_id = as_int(element.get("fastTransitionMdId"))
    if domain_id is not None:
        fields["fast_transition_domain_id"] = domain_id
    return fields


def _mode_profile(ctx: _Context, kind: SecurityKind, element_path: KeyPath) -> SecurityProfile | None:
    """
    Build a PSK/enterprise profile from an element carrying a ``mode`` token.
    """
    token = ctx.record.text(f"{element_path}.mode")
    if token is None:
        return None
    element = ctx.record.child(element_path)
    family = "Enterprise" if kind is SecurityKind.WPA_ENTERPRISE else "PSK"
    entry = _MODE_TABLE.get(token.strip().lower())

    if entry is None:
        cipher = _element_cipher(element)
        transition = False
        label = f"WPA-{family} ({token})"
    else:
        default = EncryptionCipher.AES if entry.generation == "WPA3" else EncryptionCipher.UNSPECIFIED
        cipher = entry.cipher if entry.cipher is not None else _element_cipher(element, default)
        transition = entry.transition
        label = f"{entry.generation}-{family}{entry.suffix}"

    fields: dict[str, Any] = {}
    if kind is SecurityKind.WPA_ENTERPRISE:
        fields.update(_fast_transition(element))
    else:
        fields["passphrase"] = _element_secret(ctx, element)

    return SecurityProfile(
        kind=kind,
        transition_mode=transition,
        encryption_cipher=cipher,
        protected_management_frames=PmfMode.from_vendor(element.get("pmfMode")),
        label=label,
        vendor_mode=token,
        **fields,
    )


# ────────────────────────────────────────────────────────────────────────────────
# Rules, in priority order
# ────────────────────────────────────────────────────────────────────────────────
def _sae_element(ctx: _Context) -> SecurityProfile | None:
    hit = ctx.record.first_with_path(*SAE_ELEMENT_PATHS)
    if hit is None:
        return None
    element = ctx.record.child(hit[0])
    pmf = PmfMode.from_vendor(element.get("pmfMode"))
    method = SaeMethod.from_vendor(element.get("saeMethod"))

    transition = False
    label = "WPA3-Personal"
    if pmf is PmfMode.REQUIRED and method is SaeMethod.HASH_TO_ELEMENT:
        label = "WPA3-Personal (SAE)"
    elif pmf is PmfMode.CAPABLE:
        transition = True
        label = "WPA2/WPA3-Personal (Transition)"

    return SecurityProfile(
        kind=SecurityKind.WPA_SAE,
        transition_mode=transition,
        encryption_cipher=_element_cipher(element),
        protected_management_frames=pmf,
        sae_method=method,
        passphrase=_element_secret(ctx, element),
        label=label,
    )


def _enterprise_top_level_mode(ctx: _Context) -> SecurityProfile | None:
    return _mode_profile(ctx, SecurityKind.WPA_ENTERPRISE, "WpaEnterpriseElement")


def _enterprise_nested_mode(ctx: _Context) -> SecurityProfile | None:
    return _mode_profile(ctx, SecurityKind.WPA_ENTERPRISE, "privacy.WpaEnterpriseElement")


def _enterprise_element(ctx: _Context) -> SecurityProfile | None:
    hit = ctx.record.first_with_path(*ENTERPRISE_ELEMENT_PATHS)
    if hit is None:
        return None
    element = ctx.record.child(hit[0])
    # Only "required" is taken from a mode-less element.
    pmf = PmfMode.from_vendor(element.get("pmfMode"))
    if pmf is not PmfMode.REQUIRED:
        pmf = PmfMode.UNSPECIFIED
    return SecurityProfile(
        kind=SecurityKind.WPA_ENTERPRISE,
        encryption_cipher=_element_cipher(element),
        protected_management_frames=pmf,
        label="WPA3-Enterprise" if pmf is PmfMode.REQUIRED else "WPA2-Enterprise",
        **_fast_transition(element),
    )


def _eap_element(ctx: _Context) -> SecurityProfile | None:
    hit = ctx.record.first_with_path(*EAP_ELEMENT_PATHS)
    if hit is None:
        return None
    element = ctx.record.child(hit[0])
    return SecurityProfile(
        kind=SecurityKind.WPA_ENTERPRISE,
        encryption_cipher=_element_cipher(element),
        protected_management_frames=PmfMode.from_vendor(element.get("pmfMode")),
        label="WPA2-Enterprise (802.1X)",
    )


def _psk_top_level_mode(ctx: _Context) -> SecurityProfile | None:
    return _mode_profile(ctx, SecurityKind.WPA_PSK, "WpaPskElement")


def _psk_nested_mode(ctx: _Context) -> SecurityProfile | None:
    return _mode_profile(ctx, SecurityKind.WPA_PSK, "privacy.WpaPskElement")


def _generic_mode(ctx: _Context) -> SecurityProfile | None:
    token = ctx.record.text("mode")
    if token is None:
        return None
    key = token.strip().lower()
    if key == "open":
        return SecurityProfile(kind=SecurityKind.OPEN, label="Open", vendor_mode=token)
    entry = _MODE_TABLE.get(key)
    if entry is None:
        return SecurityProfile(kind=SecurityKind.SECURED_UNKNOWN, label=token, vendor_mode=token)
    return SecurityProfile(
        kind=SecurityKind.WPA_PSK,
        transition_mode=entry.transition,
        encryption_cipher=entry.cipher or EncryptionCipher.UNSPECIFIED,
        label=f"{entry.generation}-PSK{entry.suffix}",
        vendor_mode=token,
    )


def _owe_element(ctx: _Context) -> SecurityProfile | None:
    hit = ctx.record.first_with_path(*OWE_ELEMENT_PATHS)
    if hit is None:
        return None
    element = ctx.record.child(hit[0])
    companion = element.text("oweCompanion") or ctx.record.text("oweCompanion")
    return SecurityProfile(
        kind=SecurityKind.OWE,
        encryption_cipher=EncryptionCipher.AES,
        protected_management_frames=PmfMode.from_vendor(element.get("pmfMode")),
        owe_companion_ssid=companion,
        label="OWE (Enhanced Open)",
    )


def _type_label(ctx: _Context) -> SecurityProfile | None:
    label = ctx.record.text(*TYPE_LABEL_PATHS)
    if label is None:
        return None
    kind = SecurityKind.from_name(label) or SecurityKind.SECURED_UNKNOWN
    if kind is SecurityKind.OWE:
        return SecurityProfile(
            kind=kind,
            encryption_cipher=EncryptionCipher.AES,
            owe_companion_ssid=ctx.record.text("oweCompanion"),
            label=label,
        )
    return SecurityProfile(kind=kind, label=label)


def _scalar_label(ctx: _Context) -> SecurityProfile | None:
    label = ctx.record.text(*SCALAR_LABEL_PATHS)
    if label is None:
        return None
    return SecurityProfile(kind=SecurityKind.SECURED_UNKNOWN, label=label)


def _encryption_string(ctx: _Context) -> SecurityProfile | None:
    text = ctx.record.text("encryption")
    if text is None:
        return None
    enc = text.lower()
    if "wpa3" in enc:
        return SecurityProfile(kind=SecurityKind.WPA_PSK, encryption_cipher=EncryptionCipher.AES, label="WPA3-PSK")
    if "wpa2" in enc:
        return SecurityProfile(kind=SecurityKind.WPA_PSK, encryption_cipher=EncryptionCipher.AES, label="WPA2-PSK (AES)")
    if "wpa" in enc:
        return SecurityProfile(kind=SecurityKind.WPA_PSK, encryption_cipher=EncryptionCipher.TKIP, label="WPA-PSK")
    if "aes" in enc:
        return SecurityProfile(kind=SecurityKind.WPA_PSK, encryption_cipher=EncryptionCipher.AES, label="WPA2-PSK (AES)")
    return None


def _secret_present(ctx: _Context) -> SecurityProfile | None:
    secret = ctx.record.first(*SECRET_PATHS)
    if secret is None:
        return None
    passphrase = secret if ctx.include_secrets and isinstance(secret, str) else None
    return SecurityProfile(kind=SecurityKind.WPA_PSK, passphrase=passphrase, label="WPA2-PSK (Secured)")


def _security_mode(ctx: _Context) -> SecurityProfile | None:
    label = ctx.record.text("securityMode")
    if label is None:
        return None
    return SecurityProfile(kind=SecurityKind.SECURED_UNKNOWN, label=label)


def _explicit_open_flag(ctx: _Context) -> SecurityProfile | None:
    if ctx.record.get("open") is True or ctx.record.get("isOpen") is True:
        return SecurityProfile(kind=SecurityKind.OPEN, label="Open")
    return None


def _privacy_key_names(ctx: _Context) -> SecurityProfile | None:
    privacy = ctx.record.mapping("privacy")
    if not privacy:
        return None
    keys = [str(k).lower() for k in privacy]
    if any(hint in k for k in keys for hint in _ENTERPRISE_KEY_HINTS):
        return SecurityProfile(kind=SecurityKind.WPA_ENTERPRISE, label="WPA2-Enterprise")
    if any(hint in k for k in keys for hint in _PSK_KEY_HINTS):
        return SecurityProfile(kind=SecurityKind.WPA_PSK, label="WPA2-PSK")
    return SecurityProfile(kind=SecurityKind.SECURED_UNKNOWN, label="Secured (Unknown)")


def _open_default(ctx: _Context) -> SecurityProfile | None:
    return SecurityProfile(kind=SecurityKind.OPEN, label="Open")


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("sae-element",               _sae_element),
    ClassificationRule("enterprise-top-level-mode", _enterprise_top_level_mode),
    ClassificationRule("enterprise-nested-mode",    _enterprise_nested_mode),
    ClassificationRule("enterprise-element",        _enterprise_element),
    ClassificationRule("eap-element",               _eap_element),
    ClassificationRule("psk-top-level-mode",        _psk_top_level_mode),
    ClassificationRule("psk-nested-mode",           _psk_nested_mode),
    ClassificationRule("generic-mode",              _generic_mode),
    ClassificationRule("owe-element",               _owe_element),
    ClassificationRule("type-label",                _type_label),
    ClassificationRule("scalar-label",              _scalar_label),
    ClassificationRule("encryption-string",         _encryption_string),
    ClassificationRule("secret-present",            _secret_present),
    ClassificationRule("security-mode",             _security_mode),
    ClassificationRule("explicit-open-flag",        _explicit_open_flag),
    ClassificationRule("privacy-key-names",         _privacy_key_names),
    ClassificationRule("open-default",              _open_default),
)


class SecurityProfileClassifier:
    """
    Turn a raw controller service record into a :class:`SecurityProfile`.

    ``classify`` is total: any input, including non-mappings and deeply
    nested garbage, yields exactly one profile. Records that cannot be
    placed resolve to ``SecurityKind.SECURED_UNKNOWN``.
    """

    def __init__(self, rules: tuple[ClassificationRule, ...] = DEFAULT_RULES) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)
        self.rules = rules

    def classify(self, raw: RawServiceRecord | Any, *, include_secrets: bool = False) -> SecurityProfile:
        """
        Classify ``raw``.

        Args:
            raw: Service record as returned by the controller.
            include_secrets: Copy element pre-shared keys into ``passphrase``.
                Off by default; reads from an unauthenticated source must
                never populate secrets.

        Returns:
            SecurityProfile: produced by the first matching rule.
        """
        name, profile = self.explain(raw, include_secrets=include_secrets)
        self.logger.debug("Classified service as %s via rule '%s'", profile.kind.value, name)
        return profile

    def explain(self, raw: RawServiceRecord | Any, *, include_secrets: bool = False) -> tuple[str, SecurityProfile]:
        """
        Same as :meth:`classify` but also return the name of the winning rule.
        """
        ctx = _Context(RawRecordAccessor(raw), include_secrets)
        for rule in self.rules:
            try:
                profile = rule.extract(ctx)
            except (ValueError, TypeError) as exc:
                self.logger.warning("Rule '%s' could not interpret service record: %s",
                                    rule.name, type(exc).__name__)
                return rule.name, SecurityProfile(kind=SecurityKind.SECURED_UNKNOWN, label="Secured (Unknown)")
            if profile is not None:
                return rule.name, profile
        return "open-default", SecurityProfile(kind=SecurityKind.OPEN, label="Open")


_DEFAULT_CLASSIFIER = SecurityProfileClassifier()


def classify(raw: RawServiceRecord | Any, *, include_secrets: bool = False) -> SecurityProfile:
    """Classify ``raw`` with the default rule chain."""
    return _DEFAULT_CLASSIFIER.classify(raw, include_secrets=include_secrets)
