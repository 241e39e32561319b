"""
Product business logic.

Every operation that targets one product looks it up first and answers 404
when it is missing; nothing is written in that case. The lookup and the
write are separate statements with no lock between them.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import schemas
from .repository import ProductRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Product not found"
DELETED_MESSAGE = "Product deleted"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)


def _to_product(row: dict) -> schemas.Product:
    return schemas.Product(
        id=int(row["id"]),
        name=str(row["name"]),
        price=float(row["price"]),
        availability=bool(row["availability"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def _get_existing(repository: ProductRepository, product_id: int) -> dict:
    row = await repository.find_by_id(product_id)
    if row is None:
        raise _not_found()
    return row


async def list_products(repository: ProductRepository) -> list[schemas.Product]:
    rows = await repository.find_all()
    return [_to_product(row) for row in rows]


async def get_product(repository: ProductRepository, product_id: int) -> schemas.Product:
    row = await _get_existing(repository, product_id)
    return _to_product(row)


async def create_product(repository: ProductRepository, payload: schemas.ProductCreate) -> schemas.Product:
    row = await repository.create(payload.model_dump(exclude_none=True))
    logger.info("Created product %s", row["id"])
    return _to_product(row)


async def update_product(
    repository: ProductRepository,
    product_id: int,
    payload: schemas.ProductUpdate,
) -> schemas.Product:
    await _get_existing(repository, product_id)

    row = await repository.update(product_id, payload.model_dump())
    if row is None:
        # Deleted between the lookup and the update.
        raise _not_found()

    logger.info("Updated product %s", product_id)
    return _to_product(row)


async def toggle_availability(repository: ProductRepository, product_id: int) -> schemas.Product:
    current = await _get_existing(repository, product_id)

    row = await repository.update(product_id, {"availability": not bool(current["availability"])})
    if row is None:
        raise _not_found()

    logger.info("Product %s availability set to %s", product_id, row["availability"])
    return _to_product(row)


async def delete_product(repository: ProductRepository, product_id: int) -> str:
    await _get_existing(repository, product_id)

    if not await repository.delete(product_id):
        raise _not_found()

    logger.info("Deleted product %s", product_id)
    return DELETED_MESSAGE
