"""Book image management — command and handler."""

from protean import handle
from protean.fields import Boolean, Integer, String
from protean.utils.globals import current_domain

from storefront.book.book import Book
from storefront.domain import storefront


@storefront.command(part_of="Book")
class AddBookImage:
    book_id = Integer(required=True)
    image = String(required=True, max_length=500)
    poster_status = Boolean(default=False)


@storefront.command_handler(part_of=Book)
class ManageBookImagesHandler:
    @handle(AddBookImage)
    def add_image(self, command):
        repo = current_domain.repository_for(Book)
        book = repo.get(command.book_id)
        image = book.add_image(image=command.image, poster_status=command.poster_status)
        repo.add(book)
        return str(image.id)
