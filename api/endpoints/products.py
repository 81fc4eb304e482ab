"""
Product management endpoints
"""
from typing import Annotated, Type, TypeVar
from fastapi import APIRouter, File, Form, HTTPException, Query, Response, UploadFile, status
from pydantic import ValidationError
from core.dependencies import ProductServiceDependency
from core.i18n_logger import get_i18n_logger
from schemas.product import ProductBase, ProductCreate, ProductResponse, ProductUpdate

logger = get_i18n_logger(__name__)

router = APIRouter(tags=["Products"])

PayloadT = TypeVar("PayloadT", bound=ProductBase)

ProductPart = Annotated[str, Form(description="Product fields as a JSON document")]
ImageFilePart = Annotated[UploadFile | None, File(alias="imageFile", description="Optional product image")]


def parse_product_part(raw: str, schema: Type[PayloadT]) -> PayloadT:
    """Decode the `product` multipart field, answering 422 when it is malformed"""
    try:
        return schema.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("product.invalid_payload", errors=e.error_count())
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.errors(include_url=False, include_context=False, include_input=False)
        )


def product_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Product not found"
    )


@router.get("/products", response_model=list[ProductResponse])
async def get_all_products(service: ProductServiceDependency):
    """List every product"""
    return await service.list_all()


@router.get("/products/search", response_model=list[ProductResponse])
async def search_products(
    service: ProductServiceDependency,
    keyword: Annotated[str, Query(description="Text looked up in name, description, brand and category")] = ""
):
    """Search products; an empty keyword returns every product"""
    return await service.search(keyword)


@router.get("/product/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, service: ProductServiceDependency):
    """Get a specific product by ID"""
    product = await service.get_by_id(product_id)
    if product is None:
        raise product_not_found()
    return product


@router.get(
    "/product/{product_id}/image",
    response_class=Response,
    responses={200: {"content": {"application/octet-stream": {}}}}
)
async def get_product_image(product_id: int, service: ProductServiceDependency):
    """Download the raw image attached to a product"""
    image = await service.get_image(product_id)
    if image is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product image not found"
        )
    image_type, image_data = image
    headers = {"X-Content-Type-Options": "nosniff"}
    if not image_type.lower().startswith("image/"):
        # Non-image uploads are only ever served as downloads
        headers["Content-Disposition"] = "attachment"
    return Response(content=image_data, media_type=image_type, headers=headers)


@router.post("/product", status_code=status.HTTP_201_CREATED, response_model=ProductResponse)
async def add_product(
    product: ProductPart,
    service: ProductServiceDependency,
    image_file: ImageFilePart = None
):
    """Create a product from a `product` JSON part and an optional `imageFile` part"""
    product_data = parse_product_part(product, ProductCreate)
    return await service.add(product_data, image_file)


@router.put("/product/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product: ProductPart,
    service: ProductServiceDependency,
    image_file: ImageFilePart = None
):
    """Replace a product's fields; its image is replaced only if `imageFile` is sent"""
    product_data = parse_product_part(product, ProductUpdate)
    updated = await service.update(product_id, product_data, image_file)
    if updated is None:
        raise product_not_found()
    return updated


@router.delete("/product/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, service: ProductServiceDependency):
    """Delete a product (succeeds whether or not it exists)"""
    await service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
