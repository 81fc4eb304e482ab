"""
Product store: thin data-access adapter over an AsyncSession
"""
from typing import Optional, Sequence
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from database.models.product import Product


SEARCHABLE_COLUMNS = (Product.name, Product.description, Product.brand, Product.category)


class ProductRepository:
    """
    Store contract used by ProductService.

    Every write commits immediately, so one service call is one transaction.
    Database errors are not caught here.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, product: Product) -> Product:
        """Insert when product.id is unset, otherwise flush pending changes"""
        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def find_by_id(self, product_id: int) -> Optional[Product]:
        return await self.db.get(Product, product_id)

    async def find_all(self) -> Sequence[Product]:
        result = await self.db.execute(select(Product).order_by(Product.id))
        return result.scalars().all()

    async def delete_by_id(self, product_id: int) -> bool:
        """Delete a product; returns False, without error, when the id is unknown"""
        product = await self.find_by_id(product_id)
        if product is None:
            return False
        await self.db.delete(product)
        await self.db.commit()
        return True

    async def search_by_keyword(self, keyword: str) -> Sequence[Product]:
        """
        Case-insensitive substring match over name, description, brand and
        category. LIKE wildcards in the keyword are matched literally.
        """
        query = select(Product).where(
            or_(*(column.icontains(keyword, autoescape=True) for column in SEARCHABLE_COLUMNS))
        ).order_by(Product.id)
        result = await self.db.execute(query)
        return result.scalars().all()
