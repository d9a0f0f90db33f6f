"""Discover Roku devices on the local network.

Usage:
    roku-discover [--all] [--timeout SECONDS] [--no-info] [--verbose]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .. import discovery
from ..client import RokuClient
from ..config import load_config
from ..exceptions import RokuError, RokuNoDevicesFoundError


def _build_parser(default_timeout: float) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roku-discover", description="Discover Roku devices via SSDP")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Wait for the whole window and list every device (default: stop at the first)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=default_timeout,
        help=f"Discovery window in seconds (default: {default_timeout:g})",
    )
    parser.add_argument("--no-info", action="store_true", help="Only print addresses, skip device-info queries")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


async def _describe(address: str, timeout: float) -> str:
    """Return a one-line description of the device at ``address``."""
    async with RokuClient(address, timeout=timeout) as client:
        try:
            info = await client.info()
        except (RokuError, OSError, asyncio.TimeoutError) as err:
            return f"Device: {address} (device-info unavailable: {err})"
    name = info.get("userDeviceName") or info.get("friendlyDeviceName") or "Unknown"
    model = info.get("modelName") or "unknown model"
    return f"Device: {name} ({model}) @ {address}"


async def main() -> int:
    """Run discovery and print the results. Returns the process exit code."""
    cfg = load_config()
    args = _build_parser(cfg["discovery_timeout"]).parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"Searching for Roku devices ({args.timeout:g}s)...")
    try:
        found = await discovery.discover(args.timeout, wait_for_all=args.all)
    except RokuNoDevicesFoundError:
        print("No devices found")
        return 1

    addresses = found if isinstance(found, list) else [found]
    print(f"Total devices: {len(addresses)}")
    for address in addresses:
        if args.no_info:
            print(address)
        else:
            print(await _describe(address, cfg["timeout"]))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
