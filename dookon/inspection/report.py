"""
Console Reporting

Renders query results as labelled, pretty-printed JSON blocks.
"""

import json
import sys
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional, TextIO

from sqlalchemy import inspect

STORE_NOT_FOUND = "Store not found"
PROMOTIONS_LABEL = "Promotions:"
BUNDLES_LABEL = "Bundles:"
PRODUCTS_LABEL = "Products:"


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_record(record: Any) -> Dict[str, Any]:
    """
    Convert a mapped instance into a plain dict of its column values.

    Relationships are left out so a record never pulls in lazy loads.
    """
    mapper = inspect(record).mapper
    return {attr.key: getattr(record, attr.key) for attr in mapper.column_attrs}


def format_records(label: str, records: Iterable[Any]) -> str:
    """Render records as `<label> <json array>` with 2-space indentation."""
    rows = [serialize_record(r) for r in records]
    return f"{label} {json.dumps(rows, indent=2, default=_json_default, ensure_ascii=False)}"


def print_records(label: str, records: Iterable[Any], out: Optional[TextIO] = None) -> None:
    """Write one labelled block to `out` (stdout by default)."""
    print(format_records(label, records), file=out or sys.stdout)
