# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import FastAPI

from pywlan.api.utils.auto_load import RouterRegistrar


def test_registers_discovered_routers() -> None:
    app = FastAPI()
    registrar = RouterRegistrar()
    registrar.register(app)

    assert registrar.errors == []
    assert registrar.registered == [
        "pywlan.api.routes.security.router",
        "pywlan.api.routes.telemetry.router",
    ]
    paths = set(app.openapi()["paths"])
    assert {"/security/classify", "/security/encode", "/security/validate",
            "/telemetry/rate", "/telemetry/summary"} <= paths


def test_module_name_is_package_rooted() -> None:
    registrar = RouterRegistrar()
    router_file = registrar.routes_path / "security" / "router.py"
    assert registrar.module_name(router_file) == "pywlan.api.routes.security.router"


def test_missing_routes_path_raises(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        RouterRegistrar(routes_path=tmp_path / "nowhere")
