"""Client-held shopping basket value objects.

The basket is never stored server-side: each request decodes it from the
shopper's cookie, works on the immutable value and hands a new value back for
the caller to persist.
"""

from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError, ValidationError


class MalformedBasketError(ValidationError):
    """A basket token was present but could not be decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__({"basket": [reason]})
        self.reason = reason


class UnknownItemError(ObjectNotFoundError):
    """An add was requested for a book that is not in the catalogue."""

    def __init__(self, item_id) -> None:
        super().__init__({"_entity": f"Book with id `{item_id}` does not exist"})
        self.item_id = item_id


@dataclass(frozen=True)
class BasketEntry:
    item_id: int
    quantity: int = 1


@dataclass(frozen=True)
class Basket:
    """Ordered entries, one per item, in the order items were first added."""

    entries: tuple[BasketEntry, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "Basket":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def entry_for(self, item_id) -> BasketEntry | None:
        return next((e for e in self.entries if e.item_id == item_id), None)

    @property
    def item_count(self) -> int:
        return sum(e.quantity for e in self.entries)
