from schemas.product import (
    ProductBase, ProductCreate, ProductUpdate,
    ProductResponse, DATE_FORMAT
)

__all__ = [
    'ProductBase', 'ProductCreate', 'ProductUpdate',
    'ProductResponse', 'DATE_FORMAT'
]
