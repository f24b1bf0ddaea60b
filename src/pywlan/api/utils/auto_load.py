# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import importlib
import logging
import pathlib
import traceback

from fastapi import FastAPI

PACKAGE_NAME = "pywlan"


class RouterRegistrar:
    """
    Auto-discovers and registers FastAPI routers by scanning for 'router.py'
    files under pywlan/api/routes. Modules flagged ``__skip_autoregister__``
    are ignored; import/registration failures are collected and summarized.
    """

    def __init__(self, routes_path: pathlib.Path | None = None) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

        self.package_root = pathlib.Path(__file__).resolve()
        while self.package_root.name != PACKAGE_NAME:
            if self.package_root == self.package_root.parent:
                msg = f"Could not find '{PACKAGE_NAME}' directory in path."
                self.logger.error(msg)
                raise RuntimeError(msg)
            self.package_root = self.package_root.parent

        self.routes_path = routes_path or self.package_root / "api" / "routes"
        if not self.routes_path.exists():
            msg = f"Path not found: {self.routes_path}"
            self.logger.error(msg)
            raise RuntimeError(msg)

        self.registered: list[str] = []
        self.errors: list[tuple[str, str]] = []

    def module_name(self, router_file: pathlib.Path) -> str:
        """Dotted import path of a router file, rooted at the package."""
        relative = router_file.relative_to(self.package_root.parent).with_suffix("")
        return ".".join(relative.parts)

    def register(self, app: FastAPI) -> None:
        """
        Import every discovered router module and include its ``router``.
        """
        self.logger.debug(f"Scanning directory for routers: {self.routes_path}")

        for router_file in sorted(self.routes_path.rglob("router.py")):
            module_path = self.module_name(router_file)
            try:
                module = importlib.import_module(module_path)
                if getattr(module, "__skip_autoregister__", False):
                    self.logger.debug(f"Skipping non-routable module: {module_path}")
                    continue

                router = getattr(module, "router", None)
                if router is None:
                    self.logger.debug(f"No 'router' attribute in module: {module_path}")
                    continue

                app.include_router(router)
                self.registered.append(module_path)
                self.logger.debug(f"Registered router from module: {module_path}")

            except Exception:
                error_tb = traceback.format_exc()
                self.logger.error(f"Failed to register router from '{router_file}':\n{error_tb}")
                self.errors.append((module_path, error_tb))

        self._report_summary()

    def _report_summary(self) -> None:
        if self.errors:
            self.logger.error(f"Router registration finished with {len(self.errors)} error(s): "
                              f"{', '.join(module for module, _ in self.errors)}")
        else:
            self.logger.debug(f"Router registration completed: {len(self.registered)} router(s)")
