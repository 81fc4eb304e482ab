"""
Shared dependencies across the application

Type-annotated dependencies keep the endpoints short:

    @router.get("/products")
    async def get_all_products(service: ProductServiceDependency):
        return await service.list_all()
"""
from typing import Annotated
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database.session import get_db
from database.repository import ProductRepository
from services.product_service import ProductService


# === Database Dependency ===

DbDependency = Annotated[AsyncSession, Depends(get_db)]
"""Async database session, one per request."""


# === Service Dependency ===

def get_product_service(db: DbDependency) -> ProductService:
    """Wire the product store and service on top of the request's session"""
    return ProductService(ProductRepository(db))


ProductServiceDependency = Annotated[ProductService, Depends(get_product_service)]
"""
ProductService bound to the request's session.

Tests swap it through app.dependency_overrides[get_product_service].
"""
