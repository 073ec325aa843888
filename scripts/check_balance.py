#!/usr/bin/env python3
"""
Print the Intouch partner balance as JSON.

Credentials come from INTOUCH_* environment variables or a local .env file.

Usage (from repo root):
  python scripts/check_balance.py
  python scripts/check_balance.py --auth digest --timeout 10 -v
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv

load_dotenv()

from intouch import Intouch, IntouchError


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


async def run(args: argparse.Namespace) -> int:
    overrides = {}
    if args.auth:
        overrides["auth_scheme"] = args.auth
    if args.timeout:
        overrides["timeout_seconds"] = args.timeout

    try:
        async with Intouch.from_env(**overrides) as intouch:
            balance = await intouch.balance.get()
    except IntouchError as exc:
        logging.getLogger("check_balance").error("%s: %s", type(exc).__name__, exc)
        return 1

    print(json.dumps(balance.model_dump(mode="json", exclude_none=True), indent=2))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Query the Intouch partner balance.")
    parser.add_argument("--auth", choices=["basic", "digest"], help="HTTP auth scheme (default from env or basic)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging (credentials are masked)")
    args = parser.parse_args()

    setup_logging(args.verbose)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
