"""
Product database model
"""
from sqlalchemy import Column, Integer, String, Numeric, Boolean, Date, Text, LargeBinary
from database.base import Base


class Product(Base):
    """
    Catalog product.

    The three image columns are written together by ProductService and are
    all NULL when no image was ever attached.
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=True, index=True)
    description = Column(Text, nullable=True)
    brand = Column(String(255), nullable=True, index=True)
    category = Column(String(255), nullable=True, index=True)
    price = Column(Numeric(10, 2, asdecimal=True), nullable=True)
    release_date = Column(Date, nullable=True)
    available = Column(Boolean, nullable=False, default=False)
    quantity = Column(Integer, nullable=False, default=0)

    # === Image attachment ===
    image_name = Column(String(255), nullable=True)
    image_type = Column(String(255), nullable=True)
    image_data = Column(LargeBinary, nullable=True)

    def has_image(self) -> bool:
        return self.image_data is not None and len(self.image_data) > 0

    def __repr__(self):
        return f"<Product #{self.id} {self.name!r} - {self.price} - qty {self.quantity}>"
