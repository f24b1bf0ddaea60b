# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import pytest

from pywlan.lib.mac_address import MacAddress, MacAddressFormat


def test_construct_from_str_and_str_repr() -> None:
    mac = MacAddress("F0:18:98:3C:4D:5E")
    # normalized internal
    assert mac.mac_address == "f018983c4d5e"
    # __str__ uses colon form
    assert str(mac) == "f0:18:98:3c:4d:5e"
    assert repr(mac) == "MacAddress('f0:18:98:3c:4d:5e')"


def test_construct_from_bytes_and_equality() -> None:
    mac_b = MacAddress(bytes.fromhex("001A2B3C4D5E"))
    mac_s = MacAddress("00-1a-2b-3c-4d-5e")
    assert mac_b == mac_s
    assert hash(mac_b) == hash(mac_s)
    assert mac_b != "00:1a:2b:3c:4d:5e"


def test_to_mac_format_variants() -> None:
    mac = MacAddress("001a.2b3c.4d5e")
    assert mac.to_mac_format(MacAddressFormat.FLAT)   == "001a2b3c4d5e"
    assert mac.to_mac_format(MacAddressFormat.COLON)  == "00:1a:2b:3c:4d:5e"
    assert mac.to_mac_format(MacAddressFormat.HYPHEN) == "00-1a-2b-3c-4d-5e"
    assert mac.to_mac_format(MacAddressFormat.CISCO)  == "001a.2b3c.4d5e"


def test_oui_is_first_three_octets() -> None:
    assert MacAddress("A4-83-E7-01-02-03").oui == "a4:83:e7"


@pytest.mark.parametrize(
    "mac, multicast, local",
    [
        ("00:1b:63:00:00:01", False, False),
        ("01:00:5e:00:00:00", True,  False),
        ("da:a1:19:00:00:01", False, True),   # randomized (private) address
        ("03:00:00:00:00:01", True,  True),
    ],
)
def test_address_bits(mac: str, multicast: bool, local: bool) -> None:
    address = MacAddress(mac)
    assert address.is_multicast() is multicast
    assert address.is_locally_administered() is local


def test_is_valid_and_errors() -> None:
    assert MacAddress.is_valid("aa:bb:cc:dd:ee:ff") is True
    assert MacAddress.is_valid("AABBCCDDEEFF") is True
    assert MacAddress.is_valid("0xaabbccddeeff") is True
    assert MacAddress.is_valid(b"\xaa\xbb\xcc\xdd\xee\xff") is True

    assert MacAddress.is_valid("zz:bb:cc:dd:ee:ff") is False
    assert MacAddress.is_valid("00:11:22:33:44") is False
    assert MacAddress.is_valid(None) is False
    with pytest.raises(ValueError):
        MacAddress("not-a-mac")
    with pytest.raises(TypeError):
        MacAddress(12345)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [None, "", "garbage", 42, {"mac": "00:11:22:33:44:55"}])
def test_parse_is_lenient(value: object) -> None:
    assert MacAddress.parse(value) is None


def test_parse_valid_value() -> None:
    assert MacAddress.parse("00:04:96:aa:bb:cc") == MacAddress("000496aabbcc")
