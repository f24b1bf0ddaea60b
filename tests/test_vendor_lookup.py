# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from pywlan.lib.types import OuiStr, VendorName
from pywlan.lib.vendor_lookup import StaticOuiLookup, VendorResolver


class CountingLookup:
    def __init__(self, table: dict[str, str]) -> None:
        self.table = table
        self.calls: list[str] = []

    def __call__(self, oui: OuiStr) -> VendorName | None:
        self.calls.append(oui)
        vendor = self.table.get(oui)
        return VendorName(vendor) if vendor else None


def test_static_lookup_builtin_table() -> None:
    lookup = StaticOuiLookup()
    assert lookup(OuiStr("f0:18:98")) == "Apple"
    assert lookup(OuiStr("F0:18:98")) == "Apple"
    assert lookup(OuiStr("12:34:56")) is None


def test_static_lookup_custom_table() -> None:
    lookup = StaticOuiLookup({"AA:BB:CC": "Acme"})
    assert lookup(OuiStr("aa:bb:cc")) == "Acme"
    assert lookup(OuiStr("f0:18:98")) is None


def test_resolver_uses_default_lookup() -> None:
    assert VendorResolver().resolve("00-04-96-12-34-56") == "Extreme Networks"


def test_resolver_caches_by_oui_including_misses() -> None:
    lookup = CountingLookup({"00:1b:21": "Intel"})
    cache: dict[str, str | None] = {}
    resolver = VendorResolver(lookup, cache)

    assert resolver.resolve("00:1b:21:00:00:01") == "Intel"
    assert resolver.resolve("00:1b:21:ff:ff:ff") == "Intel"
    assert resolver.resolve("00:50:56:00:00:01") is None
    assert resolver.resolve("00:50:56:00:00:02") is None

    assert lookup.calls == ["00:1b:21", "00:50:56"]
    assert resolver.cache is cache
    assert cache == {"00:1b:21": "Intel", "00:50:56": None}


def test_resolver_skips_randomized_multicast_and_invalid() -> None:
    lookup = CountingLookup({"da:a1:19": "Nobody"})
    resolver = VendorResolver(lookup)

    assert resolver.resolve("da:a1:19:00:00:01") is None    # locally administered
    assert resolver.resolve("01:00:5e:00:00:01") is None    # multicast
    assert resolver.resolve("not-a-mac") is None
    assert resolver.resolve(None) is None
    assert lookup.calls == []


def test_resolvers_do_not_share_state() -> None:
    first = VendorResolver()
    second = VendorResolver()
    first.resolve("f0:18:98:00:00:01")
    assert "f0:18:98" in first.cache
    assert second.cache == {}
