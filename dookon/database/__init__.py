"""
Database Module
"""
from .connection import Database
from .models import Base, Store, Promotion, Bundle, Product

__all__ = [
    "Database",
    "Base",
    "Store",
    "Promotion",
    "Bundle",
    "Product",
]
