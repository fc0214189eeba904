"""Domain events for the Book aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Book")
class BookAdded:
    """A new book was added to the catalogue."""

    __version__ = 1

    book_id = Integer(required=True)
    name = String(required=True)
    genre_id = Identifier()
    sale_price = Float(required=True)
    discount_percent = Integer(default=0)
    added_at = DateTime(required=True)


@storefront.event(part_of="Book")
class BookImageAdded:
    """An image was attached to a book, possibly as its poster."""

    __version__ = 1

    book_id = Integer(required=True)
    image_id = Identifier(required=True)
    image = String(required=True)
    poster_status = Boolean(default=False)
