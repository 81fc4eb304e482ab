from database.models.product import Product

__all__ = ['Product']
