# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pywlan.lib.casts import as_int, as_non_negative
from pywlan.lib.record_accessor import RawRecordAccessor
from pywlan.lib.vendor_lookup import VendorResolver
from pywlan.telemetry.link_rate import LinkRateDisambiguator
from pywlan.telemetry.rate_sample import RateSample


class Station(BaseModel):
    """Connected client with the controller's alternate field names collapsed."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    mac_address: str | None     = None
    ip_address: str | None      = None
    ipv6_address: str | None    = None
    host_name: str | None       = None
    device_type: str | None     = None
    manufacturer: str | None    = None
    username: str | None        = None
    ap_name: str | None         = None
    ap_serial: str | None       = None
    site_id: str | None         = None
    site_name: str | None       = None
    service_id: str | None      = None
    service_name: str | None    = None
    ssid: str | None            = None
    role: str | None            = None
    vlan: int | None            = None
    channel: int | None         = None
    rss: float | None           = None
    in_bytes: float             = 0.0
    out_bytes: float            = 0.0
    status: str | None          = None
    session_seconds: float | None = None
    rate: RateSample            = Field(default_factory=RateSample)


def normalize_station(raw: Any,
                      vendor_resolver: VendorResolver | None = None,
                      disambiguator: LinkRateDisambiguator | None = None) -> Station:
    """
    Map a raw station record onto :class:`Station`.

    The manufacturer reported by the controller wins; otherwise it is looked
    up by OUI through ``vendor_resolver`` when one is given.
    """
    r = RawRecordAccessor(raw)
    mac = r.text("macAddress")

    manufacturer = r.text("manufacturer", "vendor", "oui")
    if manufacturer is None and vendor_resolver is not None and mac is not None:
        manufacturer = vendor_resolver.resolve(mac)

    session = r.positive("sessionDuration", "uptime", "connection_duration")

    return Station(
        mac_address=mac,
        ip_address=r.text("ipAddress", "ip", "ipv4Address"),
        ipv6_address=r.text("ipv6Address", "ipv6"),
        host_name=r.text("hostName", "hostname", "deviceName"),
        device_type=r.text("deviceType", "type", "device_type"),
        manufacturer=manufacturer,
        username=r.text("username", "user", "userName"),
        ap_name=r.text("apName", "apDisplayName", "apHostname", "accessPointName", "ap_name"),
        ap_serial=r.text("apSerial", "apSerialNumber", "apSn", "accessPointSerial", "ap_serial"),
        site_id=r.text("siteId", "site_id"),
        site_name=r.text("siteName", "site", "location", "site_name"),
        service_id=r.text("serviceId", "service_id", "networkId"),
        service_name=r.text("serviceName", "service", "networkName"),
        ssid=r.text("ssid", "essid", "network", "networkName"),
        role=r.text("role", "roleName", "userRole"),
        vlan=as_int(r.first("vlan", "vlanId", "vlanTag", "dot1dPortNumber")),
        channel=as_int(r.first("channel", "radioChannel", "channelNumber")),
        rss=r.number("rss", "signalStrength"),
        in_bytes=as_non_negative(r.first("inBytes", "rxBytes", "clientBandwidthBytes")),
        out_bytes=as_non_negative(r.first("outBytes", "txBytes")),
        status=r.text("status", "connectionStatus", "state"),
        session_seconds=session,
        rate=(disambiguator or LinkRateDisambiguator()).resolve_rate(raw),
    )


def normalize_stations(raw_stations: Any,
                       vendor_resolver: VendorResolver | None = None,
                       disambiguator: LinkRateDisambiguator | None = None) -> list[Station]:
    if not isinstance(raw_stations, list):
        return []
    return [normalize_station(s, vendor_resolver, disambiguator) for s in raw_stations]
