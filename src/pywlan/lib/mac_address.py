# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import re
from enum import Enum, auto
from typing import cast

from pywlan.lib.types import MacAddressStr, OuiStr


class MacAddressFormat(Enum):
    FLAT    = auto()    # e.g., '001a2b3c4d5e'
    CISCO   = auto()    # e.g., '001a.2b3c.4d5e'
    COLON   = auto()    # e.g., '00:1a:2b:3c:4d:5e'
    HYPHEN  = auto()    # e.g., '00-1a-2b-3c-4d-5e'


class MacAddress:
    def __init__(self, mac_address: MacAddressStr | str | bytes | bytearray) -> None:
        """
        Initialize a MacAddress object.

        Args:
            mac_address (str | bytes | bytearray): MAC address input.

        Raises:
            ValueError: If the MAC address is invalid or improperly formatted.
            TypeError: If input type is unsupported.
        """
        if isinstance(mac_address, (bytes, bytearray)):
            mac_address = ''.join(f"{b:02x}" for b in mac_address)

        if isinstance(mac_address, str):
            if mac_address.lower().startswith("0x"):
                mac_address = mac_address[2:]

            # Remove common separators (., -, :, and spaces)
            mac_address = re.sub(r"[.\-:\s]", "", mac_address)

            if not re.fullmatch(r"[0-9a-fA-F]{12}", mac_address):
                raise ValueError(f"Invalid MAC address: {mac_address}. It should contain exactly 12 hexadecimal characters.")

            self._mac = mac_address.lower()
        else:
            raise TypeError(f"Unsupported type for mac_address: {type(mac_address).__name__} -> value: {mac_address}")

    @property
    def mac_address(self) -> MacAddressStr:
        """
        Internal raw MAC address (no separators).
        """
        return cast(MacAddressStr, self._mac)

    @property
    def oui(self) -> OuiStr:
        """
        Organizationally Unique Identifier, colon form (e.g. ``"f0:18:98"``).
        """
        return cast(OuiStr, ':'.join(self._mac[i:i+2] for i in range(0, 6, 2)))

    def __str__(self) -> str:
        return self.to_mac_format(MacAddressFormat.COLON)

    def __repr__(self) -> str:
        return f"MacAddress('{self}')"

    def is_multicast(self) -> bool:
        """
        LSB of the first octet set -> group address.
        """
        return int(self._mac[0:2], 16) & 0x01 == 0x01

    def is_locally_administered(self) -> bool:
        """
        Second LSB of the first octet set -> locally administered.

        Phones and laptops use such addresses for MAC randomization, so no
        manufacturer can be derived from their OUI.
        """
        return int(self._mac[0:2], 16) & 0x02 == 0x02

    def to_mac_format(self, fmt: MacAddressFormat = MacAddressFormat.FLAT) -> MacAddressStr:
        """
        Convert the MAC address to a specific string format.
        """
        hex_str = self._mac

        if fmt == MacAddressFormat.FLAT:
            return cast(MacAddressStr, hex_str)

        elif fmt == MacAddressFormat.COLON:
            return cast(MacAddressStr, ':'.join(hex_str[i:i+2] for i in range(0, 12, 2)))

        elif fmt == MacAddressFormat.HYPHEN:
            return cast(MacAddressStr, '-'.join(hex_str[i:i+2] for i in range(0, 12, 2)))

        elif fmt == MacAddressFormat.CISCO:
            return cast(MacAddressStr, f"{hex_str[:4]}.{hex_str[4:8]}.{hex_str[8:]}")

        else:
            raise ValueError(f"Unsupported MAC address format: {fmt}")

    def __hash__(self) -> int:
        return hash(self._mac)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MacAddress) and self._mac == other._mac

    @staticmethod
    def is_valid(mac_address: object) -> bool:
        try:
            MacAddress(mac_address)  # type: ignore[arg-type]
            return True
        except (ValueError, TypeError):
            return False

    @staticmethod
    def parse(mac_address: object) -> MacAddress | None:
        """
        Lenient constructor for raw records: ``None`` instead of raising.
        """
        try:
            return MacAddress(mac_address)  # type: ignore[arg-type]
        except (ValueError, TypeError):
            return None
