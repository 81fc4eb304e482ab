"""
API router - combines all endpoint routers, mounted under /api by main.py
"""
from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse
from api.endpoints import products
from config import GREETING

# Create main router
api_router = APIRouter()


@api_router.get("", response_class=PlainTextResponse, status_code=status.HTTP_200_OK, tags=["Greeting"])
async def greet():
    """Plain-text acknowledgment that the API is up"""
    return GREETING


# Include all endpoint routers
api_router.include_router(products.router)
