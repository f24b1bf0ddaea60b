#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import argparse
from typing import Any

import uvicorn

from pywlan.config.system_config_settings import SystemConfigSettings
from pywlan.version import __version__

APP_IMPORT_PATH = "pywlan.api.main:app"


def build_parser() -> argparse.ArgumentParser:
    host_default = SystemConfigSettings.api_host()
    port_default = SystemConfigSettings.api_port()

    parser = argparse.ArgumentParser(
        description="Launch the PyWLAN FastAPI service with optional HTTPS support."
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{__version__}",
        help="Show PyWLAN version and exit.",
    )

    parser.add_argument("--host", default=host_default, help=f"Host to bind (default: {host_default})")
    parser.add_argument("--port", default=port_default, type=int, help=f"Port to bind (default: {port_default})")
    parser.add_argument("--ssl", action="store_true", help="Enable HTTPS (requires cert and key)")
    parser.add_argument("--cert", default="./certs/cert.pem", help="Path to SSL certificate")
    parser.add_argument("--key", default="./certs/key.pem", help="Path to SSL private key")

    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug", "trace"],
        help="Uvicorn log level (default: info).",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes (default: 1).",
    )

    parser.add_argument(
        "--no-access-log",
        action="store_true",
        help="Disable Uvicorn access log.",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload on file changes (dev only).",
    )
    return parser


def uvicorn_options(args: argparse.Namespace) -> dict[str, Any]:
    """Translate parsed arguments into ``uvicorn.run`` keyword arguments."""
    options: dict[str, Any] = {
        "app": APP_IMPORT_PATH,
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
        "workers": args.workers,
        "access_log": not args.no_access_log,
    }

    if args.reload:
        # Uvicorn refuses multiple workers in reload mode
        if args.workers != 1:
            print("[WARN] --workers is ignored when --reload is enabled; using workers=1.")
        options.update({"reload": True, "workers": 1, "reload_dirs": ["src"]})

    if args.ssl:
        options.update({"ssl_certfile": args.cert, "ssl_keyfile": args.key})

    return options


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    scheme = "https" if args.ssl else "http"
    print(f"Launching PyWLAN API on {scheme}://{args.host}:{args.port}")
    uvicorn.run(**uvicorn_options(args))


if __name__ == "__main__":
    main()
