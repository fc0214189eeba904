"""Pydantic request/response schemas for the Storefront API.

These are external contracts, kept separate from the internal Protean
commands and the basket value objects.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared responses
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


# ---------------------------------------------------------------------------
# Genres
# ---------------------------------------------------------------------------
class CreateGenreRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class GenreIdResponse(BaseModel):
    genre_id: str


class GenreResponse(BaseModel):
    genre_id: str
    name: str
    book_count: int = 0


# ---------------------------------------------------------------------------
# Books
# ---------------------------------------------------------------------------
class AddBookRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "The Name of the Rose",
                    "author": "Umberto Eco",
                    "description": "A murder mystery set in a medieval abbey.",
                    "genre_id": "d9c1b0c4-1a2b-4c3d-8e9f-0a1b2c3d4e5f",
                    "sale_price": 20.0,
                    "discount_percent": 25,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    author: str | None = Field(None, max_length=150)
    description: str | None = None
    genre_id: str | None = None
    sale_price: float = Field(..., ge=0)
    discount_percent: int = Field(0, ge=0, le=100)
    is_available: bool = True


class BookIdResponse(BaseModel):
    book_id: int


class AddBookImageRequest(BaseModel):
    image: str = Field(..., max_length=500)
    poster_status: bool = False


class ImageIdResponse(BaseModel):
    image_id: str


class BookImageResponse(BaseModel):
    image_id: str
    image: str
    poster_status: bool


class BookCardResponse(BaseModel):
    book_id: int
    name: str
    author: str | None = None
    genre_id: str | None = None
    sale_price: float
    discount_percent: int
    price: float
    poster_image: str | None = None
    is_available: bool = True


class BookListResponse(BaseModel):
    genres: list[GenreResponse]
    books: list[BookCardResponse]


class CommentResponse(BaseModel):
    comment_id: str
    full_name: str
    text: str
    created_at: str | None = None


class BookDetailResponse(BaseModel):
    book: BookCardResponse
    description: str | None = None
    genre_name: str | None = None
    images: list[BookImageResponse]
    comments: list[CommentResponse]
    related_books: list[BookCardResponse]


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------
class PostCommentRequest(BaseModel):
    text: str = Field(..., min_length=1)
    full_name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=254)


class CommentIdResponse(BaseModel):
    comment_id: str


class ModerateCommentRequest(BaseModel):
    action: str  # "Approve" or "Reject"
    reason: str | None = Field(None, max_length=500)


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------
class RegisterMemberRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "reader42",
                    "email": "reader42@example.com",
                    "full_name": "Leyla Mammadova",
                    "password": "Secret123",
                }
            ]
        }
    }

    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., max_length=254)
    full_name: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=128)


class MemberIdResponse(BaseModel):
    member_id: str


class MemberProfileResponse(BaseModel):
    member_id: str
    username: str
    email: str
    full_name: str
    role: str


# ---------------------------------------------------------------------------
# Basket
# ---------------------------------------------------------------------------
class BasketEntryResponse(BaseModel):
    book_id: int
    count: int


class PricedLineResponse(BaseModel):
    book_id: int
    name: str
    price: float
    count: int
    total_price: float
    poster_image: str | None = None


class PricedBasketResponse(BaseModel):
    basket_items: list[PricedLineResponse]
    total_amount: float


class CatalogItemResponse(BaseModel):
    book_id: int
    name: str
    sale_price: float
    discount_percent: int
    poster_image: str | None = None


class CheckoutItemResponse(BaseModel):
    book: CatalogItemResponse
    count: int
