"""Control a Roku device from the command line.

Usage:
    roku-remote [--device ADDRESS] apps
    roku-remote [--device ADDRESS] active
    roku-remote [--device ADDRESS] info
    roku-remote [--device ADDRESS] launch APP_ID
    roku-remote [--device ADDRESS] press KEY [COUNT]
    roku-remote [--device ADDRESS] text STRING

Without ``--device`` the configured default device is used, falling back to
discovery of the first device on the network.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any

from .. import discovery
from ..client import RokuClient
from ..config import load_config
from ..exceptions import RokuError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roku-remote", description="Send commands to a Roku device")
    parser.add_argument("--device", help="Device address (default: configured device or discovery)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("apps", help="List installed apps")
    sub.add_parser("active", help="Show the app in the foreground")
    sub.add_parser("info", help="Show device information")

    launch = sub.add_parser("launch", help="Launch an app")
    launch.add_argument("app_id")

    press = sub.add_parser("press", help="Press a remote key (e.g. Home, Up, VolumeUp)")
    press.add_argument("key")
    press.add_argument("count", nargs="?", type=int, default=1)

    text = sub.add_parser("text", help="Type text on the device")
    text.add_argument("text")
    return parser


async def _resolve_address(args: argparse.Namespace, cfg: dict[str, Any]) -> str:
    if args.device:
        return args.device
    if cfg.get("default_device"):
        return cfg["default_device"]
    return await discovery.discover(cfg["discovery_timeout"])  # type: ignore[return-value]


async def _execute(client: RokuClient, args: argparse.Namespace) -> None:
    if args.command == "apps":
        for app in await client.apps():
            print(f"{app.id}\t{app.name}\t{app.type or ''}\t{app.version or ''}")
    elif args.command == "active":
        active = await client.active()
        print(f"{active.id}\t{active.name}" if active else "Home screen")
    elif args.command == "info":
        for key, value in sorted((await client.info()).items()):
            print(f"{key}: {value}")
    elif args.command == "launch":
        await client.launch(args.app_id)
    elif args.command == "press":
        await client.command().key(args.key, args.count).send()
    elif args.command == "text":
        await client.text(args.text)


async def main() -> int:
    """Run a single command against a device. Returns the process exit code."""
    args = _build_parser().parse_args()
    cfg = load_config()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        address = await _resolve_address(args, cfg)
        async with RokuClient(address, timeout=cfg["timeout"]) as client:
            await _execute(client, args)
    except RokuError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
