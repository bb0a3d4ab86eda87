#!/usr/bin/env python3
"""
Command-line interface for the shortlink service.

Usage:
    python shortlink_cli.py shorten <url>
    python shortlink_cli.py resolve <short_code>
    python shortlink_cli.py health
"""

import argparse
import asyncio
import json
import sys
import os

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from config import load_config
from shortlink.database import create_link_store
from shortlink.service import LinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.common.logging_config import setup_logging


class ShortlinkCLI:
    """Command-line interface for the link service."""

    def __init__(self, config, verbose: bool = False):
        """Initialize CLI."""
        self.config = config
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.service = None

    async def initialize(self):
        """Initialize store and service."""
        store = create_link_store(self.config.database_url, logger=self.logger)
        await store.connect()

        generator = ShortCodeGenerator(
            length=self.config.short_code_length,
            seed=self.config.short_code_seed,
        )
        self.service = LinkService(
            store=store,
            short_code_generator=generator,
            logger=self.logger,
            max_collision_retries=self.config.max_collision_retries,
            request_timeout_seconds=self.config.request_timeout_seconds,
        )

    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()

    async def shorten(self, url: str) -> int:
        """Shorten a URL."""
        result = await self.service.create_short_link(url)
        print(json.dumps(result.to_envelope(), indent=2))
        return 0 if result.ok else 1

    async def resolve(self, short_code: str) -> int:
        """Resolve a short code."""
        result = await self.service.resolve_short_link(short_code)
        print(json.dumps(result.to_envelope(), indent=2))
        return 0 if result.ok else 1

    async def health(self) -> int:
        """Check store health."""
        health = await self.service.health_check()
        print(json.dumps(health, indent=2))
        return 0 if health["overall"] else 1


async def main():
    parser = argparse.ArgumentParser(description="Shortlink CLI")
    parser.add_argument(
        "--db-url",
        default=None,
        help="Link store URL (defaults to DATABASE_URL / DB_GOER_SHORTLINK_URL)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a short code")
    resolve_parser.add_argument("short_code", help="Short code to resolve")

    subparsers.add_parser("health", help="Check store health")

    args = parser.parse_args()

    config = load_config()
    if args.db_url:
        config = config.model_copy(update={"database_url": args.db_url})

    cli = ShortlinkCLI(config, verbose=args.verbose)
    try:
        await cli.initialize()
        if args.command == "shorten":
            return await cli.shorten(args.url)
        if args.command == "resolve":
            return await cli.resolve(args.short_code)
        return await cli.health()
    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
