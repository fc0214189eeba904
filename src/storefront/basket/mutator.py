"""Basket mutation — the only transition is "add one more of this book"."""

from collections.abc import Callable

from storefront.basket.basket import Basket, BasketEntry, UnknownItemError


def add_item(basket: Basket, item_id: int, catalog_exists: Callable[[int], bool]) -> Basket:
    """Return a new basket with one more unit of ``item_id``.

    Repeated adds bump the existing entry's quantity in place; a first add is
    appended to the end. Books unknown to the catalogue are rejected and the
    input basket is left as it was.
    """
    if not catalog_exists(item_id):
        raise UnknownItemError(item_id)

    if basket.entry_for(item_id) is None:
        return Basket(entries=basket.entries + (BasketEntry(item_id=item_id, quantity=1),))

    return Basket(
        entries=tuple(
            BasketEntry(item_id=e.item_id, quantity=e.quantity + 1) if e.item_id == item_id else e
            for e in basket.entries
        )
    )
