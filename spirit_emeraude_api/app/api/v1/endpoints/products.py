"""
Product endpoints for API v1.

Listing and retrieving products is public; creating, replacing and
deleting them requires an administrator credential.  The optional
``category`` query parameter narrows the listing; the storefront's
``all`` tab and unknown categories are not errors (see
``CategorizedContentService.list``).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from spirit_emeraude_api.app.api.deps import get_product_service
from spirit_emeraude_api.app.core.security import require_admin
from spirit_emeraude_api.app.schemas.common import ApiResponse, envelope
from spirit_emeraude_api.app.schemas.product import ProductCreate, ProductRead
from spirit_emeraude_api.app.services.product_service import ProductService

router = APIRouter()

NOT_FOUND = "Product not found"


@router.get("", response_model=ApiResponse[List[ProductRead]])
async def list_products(
    category: Optional[str] = Query(None, description="Product category, or 'all'"),
    service: ProductService = Depends(get_product_service),
):
    """Return all products, optionally filtered by category."""
    return envelope(await service.list(category))


@router.get("/{product_id}", response_model=ApiResponse[ProductRead])
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    """Retrieve a single product.  Returns 404 if it does not exist."""
    product = await service.get(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(product)


@router.post("", response_model=ApiResponse[ProductRead], status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    service: ProductService = Depends(get_product_service),
    current_user: dict = Depends(require_admin),
):
    """Create a product (admin only)."""
    return envelope(await service.create(product_in), message="Produit créé")


@router.put("/{product_id}", response_model=ApiResponse[ProductRead])
async def update_product(
    product_id: str,
    product_in: ProductCreate,
    service: ProductService = Depends(get_product_service),
    current_user: dict = Depends(require_admin),
):
    """Replace a product as a whole (admin only)."""
    product = await service.update(product_id, product_in)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(product, message="Produit modifié")


@router.delete("/{product_id}", response_model=ApiResponse)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
    current_user: dict = Depends(require_admin),
):
    """Delete a product (admin only)."""
    if not await service.delete(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return envelope(None, message="Produit supprimé")
