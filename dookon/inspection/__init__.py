"""
Store Inspection Module
"""
from .queries import find_store_by_slug, list_promotions, list_bundles, list_products
from .report import serialize_record, format_records, print_records

__all__ = [
    "find_store_by_slug",
    "list_promotions",
    "list_bundles",
    "list_products",
    "serialize_record",
    "format_records",
    "print_records",
]
