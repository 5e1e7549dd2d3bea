from sqlalchemy import Column, Integer
from sqlmodel import Field, SQLModel

# Bounds of the INTEGER columns; anything outside is rejected as bad input
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class ProductBase(SQLModel):
    """Fields shared across Product schemas.

    Attribute names double as the JSON wire names. Every field has a zero
    value so a request body that omits it still decodes.
    """

    pname: str = Field(default="")
    pdesc: str = Field(default="")
    mrp: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    # The column was created unquoted, so Postgres folded its name to lowercase
    stBidPrice: int = Field(
        default=0,
        ge=INT32_MIN,
        le=INT32_MAX,
        sa_column=Column("stbidprice", Integer, key="stBidPrice"),
    )


class ProductCreate(ProductBase):
    """Schema for creating a product. Unknown keys (including ``id``) are ignored."""


class ProductUpdate(ProductBase):
    """Schema for replacing every field of a product."""


class ProductRead(ProductBase):
    """Schema returned to clients. ``id`` is 0 for the empty product."""

    id: int = 0


class ProductMessage(SQLModel):
    """Acknowledgement returned by create, update and delete."""

    id: int
    message: str


class Product(ProductBase, table=True):
    """A product offered for bidding."""

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
