"""Basket token codec.

The token is JSON text: a list of ``{"BookId": <int>, "Count": <int>}``
records in basket order. A token is either decoded completely or rejected;
a partially valid basket is never returned.
"""

import json

from storefront.basket.basket import Basket, BasketEntry, MalformedBasketError

ITEM_KEY = "BookId"
QUANTITY_KEY = "Count"


def _strict_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_record(record) -> BasketEntry:
    if not isinstance(record, dict) or ITEM_KEY not in record or QUANTITY_KEY not in record:
        raise MalformedBasketError(f"Each basket record needs `{ITEM_KEY}` and `{QUANTITY_KEY}`")

    item_id, quantity = record[ITEM_KEY], record[QUANTITY_KEY]
    if not _strict_int(item_id) or not _strict_int(quantity):
        raise MalformedBasketError("Basket ids and counts must be integers")
    if quantity < 1:
        raise MalformedBasketError(f"Count for book {item_id} must be at least 1")

    return BasketEntry(item_id=item_id, quantity=quantity)


def decode(token: str | None) -> Basket:
    """Decode a basket token; an absent or empty token is an empty basket."""
    if not token:
        return Basket.empty()

    try:
        records = json.loads(token)
    except (ValueError, RecursionError, TypeError):
        raise MalformedBasketError("Basket token is not valid JSON") from None

    if not isinstance(records, list):
        raise MalformedBasketError("Basket token must be a list of records")

    entries = []
    seen = set()
    for record in records:
        entry = _parse_record(record)
        if entry.item_id in seen:
            raise MalformedBasketError(f"Book {entry.item_id} appears more than once")
        seen.add(entry.item_id)
        entries.append(entry)

    return Basket(entries=tuple(entries))


def encode(basket: Basket) -> str:
    return json.dumps([{ITEM_KEY: e.item_id, QUANTITY_KEY: e.quantity} for e in basket.entries])
