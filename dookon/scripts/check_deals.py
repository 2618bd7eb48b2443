"""
Promotions and bundles of a store, looked up by slug.

Usage:
    dookon-check-deals [--slug SLUG]
"""

import argparse
import sys
from functools import partial
from typing import List, Optional, TextIO

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from dookon.config import get_settings
from dookon.config.logging import configure_logging
from dookon.inspection.queries import find_store_by_slug, list_bundles, list_promotions
from dookon.inspection.report import (
    BUNDLES_LABEL,
    PROMOTIONS_LABEL,
    STORE_NOT_FOUND,
    print_records,
)
from dookon.scripts.runner import run

logger = structlog.get_logger(__name__)


async def check_deals(session: AsyncSession, slug: str, out: Optional[TextIO] = None) -> bool:
    """
    Print the promotions and bundles of the store with `slug`.

    Returns:
        bool: False when no store has that slug
    """
    out = out or sys.stdout

    store = await find_store_by_slug(session, slug)
    if store is None:
        print(STORE_NOT_FOUND, file=out)
        return False

    logger.debug("Store found", slug=slug, store_id=store.id)
    promotions = await list_promotions(session, store.id)
    bundles = await list_bundles(session, store.id)

    print_records(PROMOTIONS_LABEL, promotions, out)
    print_records(BUNDLES_LABEL, bundles, out)
    return True


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Show the promotions and bundles of a store")
    parser.add_argument(
        "--slug",
        default=settings.inspection.store_slug,
        help="Store slug (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    configure_logging(settings=settings)
    return run(partial(check_deals, slug=args.slug))


if __name__ == "__main__":
    sys.exit(main())
