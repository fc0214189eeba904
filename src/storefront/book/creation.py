"""Adding books to the catalogue — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.book.book import Book
from storefront.domain import logger, storefront
from storefront.genre.genre import Genre


@storefront.command(part_of="Book")
class AddBook:
    name = String(required=True, max_length=255)
    author = String(max_length=150)
    description = Text()
    genre_id = Identifier()
    sale_price = Float(required=True, min_value=0.0)
    discount_percent = Integer(default=0, min_value=0, max_value=100)
    is_available = Boolean(default=True)


def next_book_id(repo) -> int:
    """Catalogue numbers are allocated sequentially, starting at 1."""
    latest = repo._dao.query.order_by("-id").limit(1).all().items
    return latest[0].id + 1 if latest else 1


@storefront.command_handler(part_of=Book)
class AddBookHandler:
    @handle(AddBook)
    def add_book(self, command):
        if command.genre_id:
            try:
                current_domain.repository_for(Genre).get(command.genre_id)
            except ObjectNotFoundError:
                raise ObjectNotFoundError({"_entity": f"Genre with id `{command.genre_id}` does not exist"}) from None

        repo = current_domain.repository_for(Book)
        book = Book.create(
            book_id=next_book_id(repo),
            name=command.name,
            author=command.author,
            description=command.description,
            genre_id=command.genre_id,
            sale_price=command.sale_price,
            discount_percent=command.discount_percent,
            is_available=command.is_available,
        )
        repo.add(book)
        logger.info("book_added", book_id=book.id, genre_id=command.genre_id)
        return book.id
