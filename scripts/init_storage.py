#!/usr/bin/env python3
"""Create the storage tables with Logfire error tracking."""

import asyncio
import sys

import logfire

from vouch.config import Settings
from vouch.crypto import KeyManager
from vouch.domain.repository import Storage
from vouch.util.di.container import create_container
from vouch.util.logging import setup_logging
from vouch.util.observability import configure_logfire


async def init_storage() -> None:
    """Resolve storage once, which creates any missing table, then shut down."""
    container = create_container()
    try:
        storage = await container.get(Storage)
        invites = await storage.list_invites()
        logfire.info("Storage ready", pending_invites=len(invites))

        keys = await container.get(KeyManager)
        logfire.info(
            "Signing key ready", key_id=keys.key_id, public_key=keys.public_key_base64()
        )
    finally:
        await container.close()


def main() -> int:
    """Initialize storage and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Initializing storage", backend=settings.storage.backend)
        asyncio.run(init_storage())
        return 0

    except Exception as e:
        logfire.error(
            "Storage initialization failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deployment fails instead of starting without a schema
        raise


if __name__ == "__main__":
    sys.exit(main())
