"""CRUD endpoints for the product catalog."""

from __future__ import annotations

from typing import Annotated

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Path,
    Query,
    Request,
    Response,
    status,
)

from catalog_api.api.dependencies.handlers import (
    get_create_product_handler,
    get_delete_product_handler,
    get_list_products_handler,
    get_patch_product_handler,
    get_product_by_id_handler,
    get_update_product_handler,
)
from catalog_api.api.schemas.product import (
    INT32_MAX,
    INT32_MIN,
    ErrorResponse,
    ProductCreate,
    ProductPatch,
    ProductRead,
    ProductUpdate,
)
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


router = APIRouter()

INVALID_ID = "El id debe ser mayor a cero."
INVALID_CATEGORY_ID = "El categoryId debe ser mayor a cero."
ID_MISMATCH = "El id de la ruta no coincide con el cuerpo."
NOT_FOUND = "Producto no encontrado."

ProductId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}
NOT_FOUND_RESPONSES = {
    **ERROR_RESPONSES,
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def _require_positive_id(product_id: int) -> None:
    if product_id <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID)


def _require_matching_id(product_id: int, body_id: int) -> None:
    if product_id <= 0 or product_id != body_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ID_MISMATCH)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


@router.get(
    "",
    summary="List products, optionally filtered by category",
    response_model=list[ProductRead],
    responses=ERROR_RESPONSES,
)
async def list_products(
    category_id: int | None = Query(
        None,
        alias="categoryId",
        ge=INT32_MIN,
        le=INT32_MAX,
        description="Only products in this category",
    ),
    handler: ListProductsHandler = Depends(get_list_products_handler),
) -> list[ProductRead]:
    if category_id is not None and category_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CATEGORY_ID
        )
    return handler.handle(category_id)


@router.get(
    "/{product_id}",
    name="get_product",
    summary="Fetch a single product",
    response_model=ProductRead,
    responses=NOT_FOUND_RESPONSES,
)
async def get_product(
    product_id: ProductId,
    handler: GetProductByIdHandler = Depends(get_product_by_id_handler),
) -> ProductRead:
    _require_positive_id(product_id)
    product = handler.handle(product_id)
    if product is None:
        raise _not_found()
    return product


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
    responses=ERROR_RESPONSES,
)
async def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    handler: CreateProductHandler = Depends(get_create_product_handler),
) -> ProductRead:
    """Persist a new product; price and code uniqueness are checked by the handler."""
    product = handler.handle(payload)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.id)
    )
    return product


@router.put(
    "/{product_id}",
    summary="Replace every mutable field of a product",
    response_model=ProductRead,
    responses=NOT_FOUND_RESPONSES,
)
async def update_product(
    product_id: ProductId,
    payload: ProductUpdate,
    handler: UpdateProductHandler = Depends(get_update_product_handler),
) -> ProductRead:
    _require_matching_id(product_id, payload.id)
    product = handler.handle(payload)
    if product is None:
        raise _not_found()
    return product


@router.patch(
    "/{product_id}",
    summary="Update only the provided product fields",
    response_model=ProductRead,
    responses=NOT_FOUND_RESPONSES,
)
async def patch_product(
    product_id: ProductId,
    payload: ProductPatch,
    handler: PatchProductHandler = Depends(get_patch_product_handler),
) -> ProductRead:
    _require_matching_id(product_id, payload.id)
    product = handler.handle(payload)
    if product is None:
        raise _not_found()
    return product


@router.delete(
    "/{product_id}",
    summary="Delete a product permanently",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSES,
)
async def delete_product(
    product_id: ProductId,
    handler: DeleteProductHandler = Depends(get_delete_product_handler),
) -> Response:
    _require_positive_id(product_id)
    if not handler.handle(product_id):
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
