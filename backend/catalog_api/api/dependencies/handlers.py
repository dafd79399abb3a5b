"""Wire repositories and handlers into FastAPI dependencies."""

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog_api.api.dependencies.db import get_session
from catalog_api.core.clock import Clock, get_clock
from catalog_api.handlers.product_commands import (
    CreateProductHandler,
    DeleteProductHandler,
    PatchProductHandler,
    UpdateProductHandler,
)
from catalog_api.handlers.product_queries import (
    GetProductByIdHandler,
    ListProductsHandler,
)
from catalog_api.repositories.product_repository import ProductRepository


def get_product_repository(db: Session = Depends(get_session)) -> ProductRepository:
    return ProductRepository(db)


def get_list_products_handler(
    repository: ProductRepository = Depends(get_product_repository),
) -> ListProductsHandler:
    return ListProductsHandler(repository)


def get_product_by_id_handler(
    repository: ProductRepository = Depends(get_product_repository),
) -> GetProductByIdHandler:
    return GetProductByIdHandler(repository)


def get_create_product_handler(
    repository: ProductRepository = Depends(get_product_repository),
    clock: Clock = Depends(get_clock),
) -> CreateProductHandler:
    return CreateProductHandler(repository, clock)


def get_update_product_handler(
    repository: ProductRepository = Depends(get_product_repository),
) -> UpdateProductHandler:
    return UpdateProductHandler(repository)


def get_patch_product_handler(
    repository: ProductRepository = Depends(get_product_repository),
) -> PatchProductHandler:
    return PatchProductHandler(repository)


def get_delete_product_handler(
    repository: ProductRepository = Depends(get_product_repository),
) -> DeleteProductHandler:
    return DeleteProductHandler(repository)
