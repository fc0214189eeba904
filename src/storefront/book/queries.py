"""Read-side queries for the catalogue pages."""

from protean.utils.globals import current_domain

from storefront.book.book import Book
from storefront.comment.comment import BookComment, CommentStatus
from storefront.genre.genre import Genre

RELATED_BOOKS_LIMIT = 5


def list_books(genre_id=None):
    """Books on the shop page, optionally narrowed to one genre."""
    query = current_domain.repository_for(Book)._dao.query
    if genre_id:
        query = query.filter(genre_id=genre_id)
    return query.order_by("id").all().items


def genres_with_counts():
    """Every genre with the number of books shelved under it."""
    genres = current_domain.repository_for(Genre)._dao.query.order_by("name").all().items
    book_query = current_domain.repository_for(Book)._dao.query
    return [(genre, book_query.filter(genre_id=str(genre.id)).all().total) for genre in genres]


def related_books(book):
    """Newest books of the same genre, the book itself included."""
    if not book.genre_id:
        return []
    return (
        current_domain.repository_for(Book)
        ._dao.query.filter(genre_id=book.genre_id)
        .order_by("-id")
        .limit(RELATED_BOOKS_LIMIT)
        .all()
        .items
    )


def approved_comments(book_id):
    return (
        current_domain.repository_for(BookComment)
        ._dao.query.filter(book_id=book_id, status=CommentStatus.APPROVED.value)
        .order_by("created_at")
        .all()
        .items
    )


def genre_name(genre_id):
    if not genre_id:
        return None
    found = current_domain.repository_for(Genre)._dao.query.filter(id=genre_id).all().items
    return found[0].name if found else None
