from fastapi import APIRouter, Depends, status

from storefront_catalog.entrypoints.http.dependencies import (
    get_add_item_to_cart_use_case,
    get_cart,
    get_session_id,
)
from storefront_catalog.entrypoints.http.dtos.cart import AddToCartRequestDTO, CartResponseDTO
from storefront_catalog.entrypoints.http.error_responses import ErrorResponse
from storefront_catalog.entrypoints.http.mappers.cart_mapper import CartMapper
from storefront_catalog.ports.cart import Cart
from storefront_catalog.use_cases.add_item_to_cart import AddItemToCart, AddItemToCartRequest


router = APIRouter(tags=["Cart"])


@router.get(
    "/cart",
    response_model=CartResponseDTO,
    summary="Current cart",
    description="Cart of the session given by the X-Session-Id header.",
)
def get_cart_contents(cart: Cart = Depends(get_cart)) -> CartResponseDTO:
    return CartMapper.to_response(cart.lines())


@router.post(
    "/cart/items",
    response_model=CartResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add an item to the cart",
    responses={
        404: {"model": ErrorResponse, "description": "Catalog or item not found"},
        422: {"model": ErrorResponse, "description": "Item out of stock or invalid body"},
    },
)
def add_item_to_cart(
    body: AddToCartRequestDTO,
    session_id: str = Depends(get_session_id),
    use_case: AddItemToCart = Depends(get_add_item_to_cart_use_case),
) -> CartResponseDTO:
    result = use_case.execute(
        AddItemToCartRequest(session_id=session_id, catalog=body.catalog, item_id=body.item_id)
    )
    return CartMapper.to_response(result.lines)
