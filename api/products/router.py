"""
Product API endpoints.

Mounted under `/api/products`. Path ids and bodies are validated before a
handler runs; failures never reach the repository (see `validation.py`).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from . import schemas, service
from .dependencies import get_product_repository
from .repository import ProductRepository

router = APIRouter()

# `products.id` is SERIAL (int4).
MAX_PRODUCT_ID = 2_147_483_647

NOT_FOUND_RESPONSE = {"model": schemas.ErrorResponse, "description": "Product not found"}
INVALID_ID_RESPONSE = {"model": schemas.ValidationErrorResponse, "description": "Bad Request - Invalid ID"}


@router.get(
    "",
    response_model=schemas.ProductListResponse,
    summary="Get a list of products",
    description="Return a list of products, newest first",
)
async def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> dict:
    products = await service.list_products(repository)
    return {"data": products}


@router.get(
    "/{product_id}",
    response_model=schemas.ProductResponse,
    summary="Get a product by ID",
    description="Return a product based on its unique ID",
    responses={400: INVALID_ID_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def get_product(
    product_id: int = Path(..., ge=1, le=MAX_PRODUCT_ID, description="The ID of the product to retrieve"),
    repository: ProductRepository = Depends(get_product_repository),
) -> dict:
    product = await service.get_product(repository, product_id)
    return {"data": product}


@router.post(
    "",
    response_model=schemas.ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creates a new product",
    description="Returns a new record in the database",
    responses={400: {"model": schemas.ValidationErrorResponse, "description": "Bad Request - invalid input data"}},
)
async def create_product(
    payload: schemas.ProductCreate,
    repository: ProductRepository = Depends(get_product_repository),
) -> dict:
    product = await service.create_product(repository, payload)
    return {"data": product}


@router.put(
    "/{product_id}",
    response_model=schemas.ProductResponse,
    summary="Updates a product with user input",
    description="Replaces name, price and availability and returns the updated product",
    responses={
        400: {"model": schemas.ValidationErrorResponse, "description": "Bad Request - Invalid ID - Invalid Input Data"},
        404: NOT_FOUND_RESPONSE,
    },
)
async def update_product(
    payload: schemas.ProductUpdate,
    product_id: int = Path(..., ge=1, le=MAX_PRODUCT_ID, description="The ID of the product to update"),
    repository: ProductRepository = Depends(get_product_repository),
) -> dict:
    product = await service.update_product(repository, product_id, payload)
    return {"data": product}


@router.patch(
    "/{product_id}",
    response_model=schemas.ProductResponse,
    summary="Update product availability",
    description="Flips the availability flag and returns the updated product",
    responses={400: INVALID_ID_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def toggle_availability(
    product_id: int = Path(..., ge=1, le=MAX_PRODUCT_ID, description="The ID of the product to update"),
    repository: ProductRepository = Depends(get_product_repository),
) -> dict:
    product = await service.toggle_availability(repository, product_id)
    return {"data": product}


@router.delete(
    "/{product_id}",
    response_model=schemas.MessageResponse,
    summary="Deletes a product by a given ID",
    description="Returns a confirmation message",
    responses={400: INVALID_ID_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def delete_product(
    product_id: int = Path(..., ge=1, le=MAX_PRODUCT_ID, description="The ID of the product to delete"),
    repository: ProductRepository = Depends(get_product_repository),
) -> dict:
    message = await service.delete_product(repository, product_id)
    return {"data": message}
