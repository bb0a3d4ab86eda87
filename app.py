#!/usr/bin/env python3
"""
Main entry point for the shortlink service.

Concurrency: requests are served concurrently via async I/O (FastAPI +
asyncpg connection pool). The pool is opened in the lifespan and closed on
shutdown, after uvicorn has drained in-flight requests.

Usage:
    python app.py

Environment variables:
    DATABASE_URL / DB_GOER_SHORTLINK_URL - Link store URL (postgres://... or memory://)
    CREATE_TABLES - Set to 'true' to create the links table on startup
    HOST, PORT - Address to listen on
    TLS, CERT_FILE, KEY_FILE - Serve over TLS with the given cert/key
    LOG_LEVEL - Logging level
"""

import os
import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortlink.database import create_link_store
from shortlink.errors import StoreError
from shortlink.service import LinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting shortlink service...")

    store = create_link_store(
        config.database_url,
        logger=logger,
        **_store_options(config),
    )
    try:
        await store.connect()
    except StoreError as e:
        logger.error(f"Link store unavailable at startup, will retry per call: {e}")

    generator = ShortCodeGenerator(
        length=config.short_code_length,
        seed=config.short_code_seed,
    )
    service = LinkService(
        store=store,
        short_code_generator=generator,
        logger=logger,
        max_collision_retries=config.max_collision_retries,
        request_timeout_seconds=config.request_timeout_seconds,
    )

    app.state.store = store
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down shortlink service...")
    await service.close()
    logger.info("Service stopped")


def _store_options(config: Config) -> dict:
    """PostgreSQL pool options derived from configuration."""
    return {
        "pool_min_size": config.pool_min_size,
        "pool_max_size": config.pool_max_size,
        "command_timeout_seconds": config.request_timeout_seconds,
        "create_tables": config.create_tables,
    }


def _ssl_options(config: Config) -> dict:
    """uvicorn TLS keyword arguments, empty when TLS is disabled.

    Raises:
        FileNotFoundError: If TLS is enabled and a cert or key file is missing
    """
    if not config.tls:
        return {}
    for path in (config.cert_file, config.key_file):
        if not os.path.isfile(path):
            raise FileNotFoundError(f"TLS file not found: {path}")
    return {"ssl_certfile": config.cert_file, "ssl_keyfile": config.key_file}


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Shortlink Service")
    logger.info(f"Configuration: {config.safe_dump()}")

    try:
        ssl_options = _ssl_options(config)
    except FileNotFoundError as e:
        logger.error(f"Failed to load TLS credentials: {e}")
        sys.exit(1)

    app = create_app(
        store_instance=None,  # Set in lifespan
        service_instance=None,
        config=config,
        lifespan=lifespan,
    )
    app.state.logger = logger

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
        **ssl_options,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port} (tls={config.tls})")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
