"""FastAPI routes for the cookie-held shopping basket.

The basket lives in the ``basketItemList`` cookie as a percent-encoded codec
token. These routes are the only place that reads or writes the cookie; the
basket engine itself never sees HTTP.
"""

from urllib.parse import quote, unquote

from fastapi import APIRouter, Cookie, Response

from storefront.api.schemas import (
    BasketEntryResponse,
    CatalogItemResponse,
    CheckoutItemResponse,
    PricedBasketResponse,
    PricedLineResponse,
)
from storefront.basket import codec, pricing
from storefront.basket.basket import Basket, MalformedBasketError
from storefront.basket.catalog import BookCatalog
from storefront.basket.mutator import add_item
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

BASKET_COOKIE = "basketItemList"

basket_router = APIRouter(prefix="/basket", tags=["basket"])


def load_basket(cookie: str | None) -> Basket:
    """Decode the basket cookie; a corrupted cookie starts a fresh basket."""
    try:
        return codec.decode(unquote(cookie) if cookie else None)
    except MalformedBasketError as exc:
        logger.warning("basket_cookie_discarded", reason=exc.reason)
        return Basket.empty()


def store_basket(response: Response, basket: Basket) -> None:
    response.set_cookie(BASKET_COOKIE, quote(codec.encode(basket), safe=""))


def priced_response(priced: pricing.PricedBasket) -> PricedBasketResponse:
    return PricedBasketResponse(
        basket_items=[
            PricedLineResponse(
                book_id=line.item_id,
                name=line.name,
                price=float(line.unit_price),
                count=line.quantity,
                total_price=float(line.line_total),
                poster_image=line.poster_image,
            )
            for line in priced.lines
        ],
        total_amount=float(priced.grand_total),
    )


@basket_router.post("/items/{book_id}", response_model=PricedBasketResponse)
async def add_to_basket(
    book_id: int,
    response: Response,
    basket_cookie: str | None = Cookie(default=None, alias=BASKET_COOKIE),
) -> PricedBasketResponse:
    """Add one copy of a book and return the re-priced basket."""
    catalog = BookCatalog()
    basket = add_item(load_basket(basket_cookie), book_id, catalog.exists)
    store_basket(response, basket)

    logger.info("basket_item_added", book_id=book_id, entries=len(basket.entries))
    return priced_response(pricing.project(basket, catalog.by_id))


@basket_router.get("", response_model=list[BasketEntryResponse])
async def show_basket(
    basket_cookie: str | None = Cookie(default=None, alias=BASKET_COOKIE),
) -> list[BasketEntryResponse]:
    basket = load_basket(basket_cookie)
    return [BasketEntryResponse(book_id=e.item_id, count=e.quantity) for e in basket.entries]


@basket_router.get("/checkout", response_model=list[CheckoutItemResponse])
async def checkout(
    basket_cookie: str | None = Cookie(default=None, alias=BASKET_COOKIE),
) -> list[CheckoutItemResponse]:
    """Books and counts for the final review before an order is placed."""
    lines = pricing.checkout_lines(load_basket(basket_cookie), BookCatalog().by_id)
    return [
        CheckoutItemResponse(
            book=CatalogItemResponse(
                book_id=line.item.id,
                name=line.item.name,
                sale_price=float(line.item.base_price),
                discount_percent=line.item.discount_percent,
                poster_image=line.item.poster_image,
            ),
            count=line.quantity,
        )
        for line in lines
    ]
