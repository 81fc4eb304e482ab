from database.base import Base
from database.session import engine, AsyncSessionLocal, get_db, build_engine, create_tables
from database.models.product import Product
from database.repository import ProductRepository

__all__ = [
    'Base', 'engine', 'AsyncSessionLocal', 'get_db', 'build_engine', 'create_tables',
    'Product', 'ProductRepository'
]
