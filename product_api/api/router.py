from fastapi import APIRouter

from product_api.api import products

api_router = APIRouter()

api_router.include_router(products.router)
