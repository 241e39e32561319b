"""
FastAPI dependencies for product routes.
"""

from __future__ import annotations

from fastapi import Depends, Request

from core.db import Database

from .repository import PostgresProductRepository, ProductRepository


def get_database(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not configured. It is created in the app lifespan.")
    return db


def get_product_repository(db: Database = Depends(get_database)) -> ProductRepository:
    return PostgresProductRepository(db)
