"""
Database base configuration
Import all models here to ensure they're registered with SQLAlchemy
"""
from sqlalchemy.orm import declarative_base

# Create base class for all models
Base = declarative_base()

# Import models so that Base.metadata knows every table
from database.models.product import Product  # noqa: E402

__all__ = ['Base', 'Product']
