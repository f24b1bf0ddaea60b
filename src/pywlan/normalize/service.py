# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pywlan.lib.casts import as_bool, as_int
from pywlan.lib.record_accessor import RawRecordAccessor
from pywlan.security.classifier import SecurityProfileClassifier
from pywlan.security.profile import SecurityProfile


class Service(BaseModel):
    """Wireless service (WLAN) with canonical names and a classified security profile."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None                  = None
    name: str | None                = None
    ssid: str | None                = None
    description: str | None         = None
    enabled: bool                   = True
    vlan: int | None                = None
    hidden: bool                    = False
    captive_portal: bool            = False
    band: str | None                = None
    max_clients: int | None         = None
    aaa_policy_id: str | None       = None
    security: SecurityProfile


def _enabled(r: RawRecordAccessor) -> bool:
    explicit = r.get("enabled")
    if explicit is not None:
        return as_bool(explicit)
    status = r.text("status")
    if status is not None:
        return status.strip().lower() != "disabled"
    return True


def _first_flag(r: RawRecordAccessor, *paths: str) -> bool:
    for path in paths:
        value = r.get(path)
        if value is not None:
            return as_bool(value)
    return False


def normalize_service(raw: Any,
                      classifier: SecurityProfileClassifier | None = None,
                      *, include_secrets: bool = False) -> Service:
    r = RawRecordAccessor(raw)
    return Service(
        id=r.text("id", "serviceId", "service_id"),
        name=r.text("name", "serviceName", "ssid"),
        ssid=r.text("ssid", "name", "serviceName"),
        description=r.text("description", "desc"),
        enabled=_enabled(r),
        vlan=as_int(r.first("vlan", "dot1dPortNumber", "vlanId")),
        hidden=_first_flag(r, "hidden", "suppressSsid"),
        captive_portal=_first_flag(r, "captivePortal", "enableCaptivePortal"),
        band=r.text("band"),
        max_clients=as_int(r.first("maxClients", "max_clients", "maxUsers")),
        aaa_policy_id=r.text("aaaPolicyId", "aaa_policy_id"),
        security=(classifier or SecurityProfileClassifier()).classify(raw, include_secrets=include_secrets),
    )


def normalize_services(raw_services: Any,
                       classifier: SecurityProfileClassifier | None = None) -> list[Service]:
    if not isinstance(raw_services, list):
        return []
    shared = classifier or SecurityProfileClassifier()
    return [normalize_service(s, shared) for s in raw_services]
