"""Pricing projection — turns a basket into priced, display-ready lines."""

from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from storefront.basket.basket import Basket
from storefront.basket.catalog import CatalogItem
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")

Lookup = Callable[[int], CatalogItem | None]


@dataclass(frozen=True)
class PricedLine:
    item_id: int
    name: str
    unit_price: Decimal
    quantity: int
    line_total: Decimal
    poster_image: str | None = None


@dataclass(frozen=True)
class PricedBasket:
    lines: tuple[PricedLine, ...] = field(default_factory=tuple)
    grand_total: Decimal = Decimal("0")


@dataclass(frozen=True)
class CheckoutLine:
    item: CatalogItem
    quantity: int


def unit_price(item: CatalogItem) -> Decimal:
    """Effective price of one unit after the book's discount."""
    if item.discount_percent > 0:
        price = item.base_price * (1 - Decimal(item.discount_percent) / 100)
    else:
        price = item.base_price
    return price.quantize(CENT, rounding=ROUND_HALF_UP)


def _resolved(basket: Basket, lookup: Lookup):
    for entry in basket.entries:
        item = lookup(entry.item_id)
        if item is None:
            # Book removed from the catalogue after it was put in the basket
            logger.info("basket_entry_skipped", item_id=entry.item_id)
            continue
        yield entry, item


def project(basket: Basket, lookup: Lookup) -> PricedBasket:
    """Price every entry that still resolves against the catalogue."""
    lines = []
    grand_total = Decimal("0")

    for entry, item in _resolved(basket, lookup):
        price = unit_price(item)
        line = PricedLine(
            item_id=item.id,
            name=item.name,
            unit_price=price,
            quantity=entry.quantity,
            line_total=price * entry.quantity,
            poster_image=item.poster_image,
        )
        grand_total += line.line_total
        lines.append(line)

    return PricedBasket(lines=tuple(lines), grand_total=grand_total)


def checkout_lines(basket: Basket, lookup: Lookup) -> list[CheckoutLine]:
    """Pair each resolvable entry with its catalogue item for final review."""
    return [CheckoutLine(item=item, quantity=entry.quantity) for entry, item in _resolved(basket, lookup)]
