"""Book aggregate with its images.

Books are identified by an integer catalogue number rather than the domain's
default UUID, because shoppers' basket cookies carry integer book ids.
"""

from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    Text,
)

from storefront.book.events import BookAdded, BookImageAdded
from storefront.domain import storefront

MAX_IMAGES = 10


@storefront.entity(part_of="Book")
class BookImage:
    image = String(required=True, max_length=500)
    poster_status = Boolean(default=False)


@storefront.aggregate
class Book:
    id = Integer(identifier=True)
    name = String(required=True, max_length=255)
    author = String(max_length=150)
    description = Text()
    genre_id = Identifier()
    sale_price = Float(required=True, min_value=0.0)
    discount_percent = Integer(default=0, min_value=0, max_value=100)
    is_available = Boolean(default=True)
    images = HasMany(BookImage)
    created_at = DateTime(default=datetime.now)

    @invariant.post
    def images_cannot_exceed_maximum(self):
        if len(self.images) > MAX_IMAGES:
            raise ValidationError({"images": [f"Cannot have more than {MAX_IMAGES} images"]})

    @invariant.post
    def at_most_one_poster_image(self):
        if len([i for i in self.images if i.poster_status]) > 1:
            raise ValidationError({"images": ["Only one image can be the poster"]})

    @classmethod
    def create(
        cls,
        book_id,
        name,
        sale_price,
        author=None,
        description=None,
        genre_id=None,
        discount_percent=0,
        is_available=True,
    ):
        now = datetime.now()
        book = cls(
            id=book_id,
            name=name,
            author=author,
            description=description,
            genre_id=genre_id,
            sale_price=sale_price,
            discount_percent=discount_percent or 0,
            is_available=is_available,
            created_at=now,
        )
        book.raise_(
            BookAdded(
                book_id=book.id,
                name=name,
                genre_id=genre_id,
                sale_price=sale_price,
                discount_percent=book.discount_percent,
                added_at=now,
            )
        )
        return book

    @property
    def poster_image(self) -> BookImage | None:
        return next((i for i in self.images if i.poster_status), None)

    def add_image(self, image, poster_status=False):
        """Attach an image; a new poster replaces the previous one."""
        with atomic_change(self):
            if poster_status:
                for existing in self.images:
                    if existing.poster_status:
                        existing.poster_status = False

            book_image = BookImage(image=image, poster_status=poster_status)
            self.add_images(book_image)

        self.raise_(
            BookImageAdded(
                book_id=self.id,
                image_id=book_image.id,
                image=image,
                poster_status=poster_status,
            )
        )
        return book_image
