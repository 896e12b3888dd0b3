"""Command line entry point."""

import argparse
import asyncio
import sys
from typing import List, Optional

import aiohttp

from liberica_locator.config import Settings
from liberica_locator.errors import LocatorError, log_error
from liberica_locator.liberica import resolve_liberica_url
from liberica_locator.logging import configure_logging, get_logger

logger = get_logger("cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="liberica-locator",
        description="Print the download URL of a Liberica NIK release asset",
    )
    parser.add_argument("java_version", help="Requested java version, e.g. 17 or 17.0.1")
    parser.add_argument("--package", default="jdk", help="Java package, e.g. jdk or jdk+fx")
    parser.add_argument("--graalvm", default=None, help="Companion GraalVM version to pin")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> str:
    return await resolve_liberica_url(
        args.java_version, args.package, args.graalvm, settings=settings
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Resolve and print a download URL."""
    args = parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        url = asyncio.run(run(args, settings))
    except (LocatorError, aiohttp.ClientError) as e:
        log_error(e, context={"java_version": args.java_version}, logger=logger)
        return 1

    print(url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
