from pydantic import BaseModel, Field


class AddToCartRequestDTO(BaseModel):
    catalog: str = Field(description="Catalog the item belongs to", examples=["physical"])
    item_id: str = Field(
        description="Item identifier",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
        min_length=1,
    )


class CartLineDTO(BaseModel):
    item_id: str
    name: str
    price: str
    quantity: int


class CartResponseDTO(BaseModel):
    lines: list[CartLineDTO]
    item_count: int
