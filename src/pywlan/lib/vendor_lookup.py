# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

"""
Station manufacturer lookup by OUI.

The lookup source and the cache storage are both injected; the resolver keeps
no module-level state. Fetching from a remote OUI service is the caller's concern;
plug it in as the ``lookup`` callable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableMapping

from pywlan.lib.mac_address import MacAddress
from pywlan.lib.types import OuiStr, VendorName

OuiLookup = Callable[[OuiStr], VendorName | None]

# OUI to vendor name mapping (first 3 octets of the MAC address)
_OUI_VENDOR_MAP: dict[str, str] = {
    # Apple
    '00:1b:63': 'Apple',
    '28:cf:e9': 'Apple',
    '3c:07:54': 'Apple',
    'a4:83:e7': 'Apple',
    'f0:18:98': 'Apple',

    # Samsung
    '00:16:32': 'Samsung',
    '5c:0a:5b': 'Samsung',
    '8c:77:12': 'Samsung',

    # Intel
    '00:1b:21': 'Intel',
    '3c:a9:f4': 'Intel',
    '8c:8d:28': 'Intel',

    # Google
    '3c:5a:b4': 'Google',
    'f4:f5:d8': 'Google',

    # Extreme Networks
    '00:04:96': 'Extreme Networks',
    'b4:c7:99': 'Extreme Networks',

    # Cisco
    '00:1e:bd': 'Cisco',
    '00:26:0a': 'Cisco',
}


class StaticOuiLookup:
    """Lookup over a fixed OUI table (the built-in one by default)."""

    def __init__(self, table: dict[str, str] | None = None) -> None:
        self._table = {k.lower(): v for k, v in (table if table is not None else _OUI_VENDOR_MAP).items()}

    def __call__(self, oui: OuiStr) -> VendorName | None:
        vendor = self._table.get(oui.lower())
        return VendorName(vendor) if vendor is not None else None


class VendorResolver:
    """
    Resolve a MAC address to a manufacturer name through a cache.

    Args:
        lookup: Callable mapping an OUI (``"aa:bb:cc"``) to a vendor name or ``None``.
        cache: Mapping used as cache storage, owned by the caller. A fresh
            dict is used when omitted.
    """

    def __init__(self, lookup: OuiLookup | None = None,
                 cache: MutableMapping[str, str | None] | None = None) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)
        self._lookup: OuiLookup = lookup or StaticOuiLookup()
        self._cache: MutableMapping[str, str | None] = cache if cache is not None else {}

    @property
    def cache(self) -> MutableMapping[str, str | None]:
        return self._cache

    def resolve(self, mac: object) -> VendorName | None:
        """
        Vendor for ``mac``; ``None`` for invalid, multicast or randomized MACs.
        """
        address = MacAddress.parse(mac)
        if address is None or address.is_multicast() or address.is_locally_administered():
            return None

        oui = address.oui
        if oui in self._cache:
            cached = self._cache[oui]
            return VendorName(cached) if cached is not None else None

        vendor = self._lookup(oui)
        self._cache[oui] = vendor
        self.logger.debug("OUI %s resolved to %s", oui, vendor)
        return vendor
