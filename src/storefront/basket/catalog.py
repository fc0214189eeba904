"""Catalogue port used by the basket.

The basket only ever reads the catalogue. ``CatalogLookup`` is the contract;
``BookCatalog`` answers it from the ``Book`` repository of the active domain.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain


@dataclass(frozen=True)
class CatalogItem:
    """Read-only pricing view of a book."""

    id: int
    name: str
    base_price: Decimal
    discount_percent: int = 0
    poster_image: str | None = None


class CatalogLookup(ABC):
    @abstractmethod
    def by_id(self, item_id: int) -> CatalogItem | None:
        """Return the catalogue item, or None when it no longer exists."""
        ...

    def exists(self, item_id: int) -> bool:
        return self.by_id(item_id) is not None


class BookCatalog(CatalogLookup):
    """Catalogue lookup over the persisted ``Book`` aggregates."""

    def by_id(self, item_id: int) -> CatalogItem | None:
        from storefront.book.book import Book

        try:
            book = current_domain.repository_for(Book).get(item_id)
        except ObjectNotFoundError:
            return None
        return to_catalog_item(book)


def to_catalog_item(book) -> CatalogItem:
    poster = book.poster_image
    return CatalogItem(
        id=book.id,
        name=book.name,
        # Float field → Decimal through str to keep the printed cents
        base_price=Decimal(str(book.sale_price)),
        discount_percent=book.discount_percent or 0,
        poster_image=poster.image if poster else None,
    )
