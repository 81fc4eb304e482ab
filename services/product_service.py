"""
Product business logic service
"""
from typing import Optional, Sequence
from fastapi import UploadFile
from core.i18n_logger import get_i18n_logger
from database.models.product import Product
from database.repository import ProductRepository
from schemas.product import ProductCreate, ProductUpdate

logger = get_i18n_logger(__name__)

DEFAULT_IMAGE_TYPE = "application/octet-stream"


class ProductService:
    """
    Service for product business logic.

    Owns the two rules that sit between the API and the store: attaching an
    uploaded image, and merging an update onto the stored record. Missing
    products are reported as None, store errors propagate unchanged.
    """

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def list_all(self) -> Sequence[Product]:
        """Get every product, ordered by id"""
        products = await self.repository.find_all()
        logger.debug("product.listed", count=len(products))
        return products

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get a product by ID, or None"""
        product = await self.repository.find_by_id(product_id)
        if product is None:
            logger.debug("product.not_found", product_id=product_id)
        else:
            logger.debug("product.fetched", product_id=product_id)
        return product

    async def add(
        self,
        product_data: ProductCreate,
        image_file: Optional[UploadFile] = None
    ) -> Product:
        """Create a new product, attaching the image when one was uploaded"""
        product = Product(**product_data.model_dump())
        await self._attach_image(product, image_file)

        product = await self.repository.save(product)
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    async def update(
        self,
        product_id: int,
        product_data: ProductUpdate,
        image_file: Optional[UploadFile] = None
    ) -> Optional[Product]:
        """
        Overwrite every non-image field of a stored product.

        The image fields change only when a non-empty file is supplied.
        Returns None, without writing, when the product does not exist.
        """
        product = await self.repository.find_by_id(product_id)
        if product is None:
            logger.debug("product.not_found", product_id=product_id)
            return None

        for field, value in product_data.model_dump().items():
            setattr(product, field, value)
        await self._attach_image(product, image_file)

        product = await self.repository.save(product)
        logger.info("product.updated", product_id=product.id, name=product.name)
        return product

    async def delete(self, product_id: int) -> None:
        """Delete a product; deleting an unknown id succeeds"""
        if await self.repository.delete_by_id(product_id):
            logger.info("product.deleted", product_id=product_id)
        else:
            logger.debug("product.delete_missing", product_id=product_id)

    async def search(self, keyword: Optional[str]) -> Sequence[Product]:
        """Search products by keyword; a blank keyword lists everything"""
        if keyword is None or not keyword.strip():
            products = await self.repository.find_all()
        else:
            products = await self.repository.search_by_keyword(keyword.strip())
        logger.debug("product.searched", keyword=keyword or "", count=len(products))
        return products

    async def get_image(self, product_id: int) -> Optional[tuple[str, bytes]]:
        """Return (content type, bytes) of a product's image, or None"""
        product = await self.get_by_id(product_id)
        if product is None or not product.has_image():
            return None
        return product.image_type or DEFAULT_IMAGE_TYPE, product.image_data

    @staticmethod
    async def _attach_image(product: Product, image_file: Optional[UploadFile]) -> None:
        """Copy name, content type and bytes of a non-empty upload onto the product"""
        if image_file is None:
            return

        data = await image_file.read()
        if not data:
            return

        product.image_name = image_file.filename or ""
        product.image_type = image_file.content_type or DEFAULT_IMAGE_TYPE
        product.image_data = data
        logger.info(
            "product.image_attached",
            image_name=product.image_name,
            image_type=product.image_type,
            size=len(data),
            name=product.name
        )
