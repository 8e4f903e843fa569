#!/usr/bin/env python3
"""Recompute every design's score from its votes.

Repairs scores left stale when a vote was recorded but the score write
failed. Safe to run while the API is serving traffic.
"""

import asyncio
import sys

import logfire

from gallery.config import Settings
from gallery.domain.error import NotFoundError
from gallery.domain.service import DesignService, VoteService
from gallery.util.di.container import create_container
from gallery.util.observability import configure_logfire


async def reconcile_all() -> int:
    """Reconcile all designs, one transaction per design.

    Returns:
        Number of designs whose score was corrected
    """
    container = create_container()
    corrected = 0
    try:
        async with container() as request_container:
            design_service = await request_container.get(DesignService)
            designs = await design_service.list_designs()

        for design in designs:
            async with container() as request_container:
                vote_service = await request_container.get(VoteService)
                try:
                    score = await vote_service.reconcile_score(design.id)
                except NotFoundError:
                    # Deleted since the listing
                    logfire.info("Design gone, skipping", design_id=str(design.id))
                    continue
                if score != design.score:
                    corrected += 1

        logfire.info(
            "Score reconciliation finished", designs=len(designs), corrected=corrected
        )
        return corrected
    finally:
        await container.close()


def main() -> int:
    """Run reconciliation and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        asyncio.run(reconcile_all())
        return 0
    except Exception as e:
        logfire.error(
            "Score reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
