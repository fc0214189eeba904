"""PostComment — a shopper comments on a book.

Signed-in members comment under the name and email of their account;
anonymous shoppers must give both themselves. Every comment starts pending.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from storefront.book.book import Book
from storefront.comment.comment import BookComment
from storefront.domain import logger, storefront
from storefront.member.member import Member
from storefront.shared.email import checked_email


@storefront.command(part_of="BookComment")
class PostComment:
    book_id = Integer(required=True)
    text = Text(required=True)
    full_name = String(max_length=100)
    email = String(max_length=254)
    username = String(max_length=50)  # Set when the shopper is signed in


def _author_of(command):
    if command.username:
        member = Member.find_by_username(command.username)
        if member is None:
            raise ObjectNotFoundError({"_entity": f"Member `{command.username}` does not exist"})
        return str(member.id), member.full_name, member.email

    errors = {}
    if not (command.email or "").strip():
        errors["email"] = ["Email is required"]
    if not (command.full_name or "").strip():
        errors["full_name"] = ["Full name is required"]
    if errors:
        raise ValidationError(errors)
    return None, command.full_name.strip(), checked_email(command.email.strip())


@storefront.command_handler(part_of=BookComment)
class PostCommentHandler:
    @handle(PostComment)
    def post_comment(self, command):
        # Raises ObjectNotFoundError for unknown books
        current_domain.repository_for(Book).get(command.book_id)

        member_id, full_name, email = _author_of(command)
        comment = BookComment.post(
            book_id=command.book_id,
            member_id=member_id,
            full_name=full_name,
            email=email,
            text=command.text,
        )
        current_domain.repository_for(BookComment).add(comment)
        logger.info("comment_posted", comment_id=str(comment.id), book_id=command.book_id, member_id=member_id)
        return str(comment.id)
