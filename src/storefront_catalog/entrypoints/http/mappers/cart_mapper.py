from __future__ import annotations

from storefront_catalog.entrypoints.http.dtos.cart import CartLineDTO, CartResponseDTO
from storefront_catalog.ports.cart import CartLine


class CartMapper:
    """Maps cart lines to REST DTOs."""

    @staticmethod
    def to_response(lines: list[CartLine]) -> CartResponseDTO:
        return CartResponseDTO(
            lines=[
                CartLineDTO(
                    item_id=line.item.id,
                    name=line.item.name,
                    price=str(line.item.price),
                    quantity=line.quantity,
                )
                for line in lines
            ],
            item_count=sum(line.quantity for line in lines),
        )
