"""
Store-Scoped Queries

Read-only lookups of a store and the collections it owns. Every collection
query filters on the owning store's id and nothing else.
"""

from typing import List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dookon.database.models import Bundle, Product, Promotion, Store

ModelT = TypeVar("ModelT", Promotion, Bundle, Product)


async def find_store_by_slug(session: AsyncSession, slug: str) -> Optional[Store]:
    """Return the store with the given slug, or None."""
    result = await session.execute(select(Store).where(Store.slug == slug).limit(1))
    return result.scalars().first()


async def _list_for_store(session: AsyncSession, model: Type[ModelT], store_id: str) -> List[ModelT]:
    result = await session.execute(select(model).where(model.store_id == store_id))
    return list(result.scalars().all())


async def list_promotions(session: AsyncSession, store_id: str) -> List[Promotion]:
    """All promotions of a store."""
    return await _list_for_store(session, Promotion, store_id)


async def list_bundles(session: AsyncSession, store_id: str) -> List[Bundle]:
    """All bundles of a store."""
    return await _list_for_store(session, Bundle, store_id)


async def list_products(session: AsyncSession, store_id: str) -> List[Product]:
    """All products of a store. An unknown store id yields an empty list."""
    return await _list_for_store(session, Product, store_id)
