"""
Products of a store, looked up by store id.

The store itself is not checked: an unknown id prints an empty list.

Usage:
    dookon-check-products [--store-id ID]
"""

import argparse
import sys
from functools import partial
from typing import List, Optional, TextIO

from sqlalchemy.ext.asyncio import AsyncSession

from dookon.config import get_settings
from dookon.config.logging import configure_logging
from dookon.inspection.queries import list_products
from dookon.inspection.report import PRODUCTS_LABEL, print_records
from dookon.scripts.runner import run


async def check_products(session: AsyncSession, store_id: str, out: Optional[TextIO] = None) -> int:
    """Print the products of `store_id` and return how many there are."""
    products = await list_products(session, store_id)
    print_records(PRODUCTS_LABEL, products, out)
    return len(products)


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Show the products of a store")
    parser.add_argument(
        "--store-id",
        default=settings.inspection.store_id,
        help="Store id (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    configure_logging(settings=settings)
    return run(partial(check_products, store_id=args.store_id))


if __name__ == "__main__":
    sys.exit(main())
