"""Domain events for the BookComment aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="BookComment")
class CommentPosted:
    """A shopper posted a comment; it waits for moderation."""

    __version__ = 1

    comment_id = Identifier(required=True)
    book_id = Integer(required=True)
    member_id = Identifier()
    posted_at = DateTime(required=True)


@storefront.event(part_of="BookComment")
class CommentApproved:
    __version__ = 1

    comment_id = Identifier(required=True)
    book_id = Integer(required=True)
    moderated_at = DateTime(required=True)


@storefront.event(part_of="BookComment")
class CommentRejected:
    __version__ = 1

    comment_id = Identifier(required=True)
    book_id = Integer(required=True)
    reason = String()
    moderated_at = DateTime(required=True)
