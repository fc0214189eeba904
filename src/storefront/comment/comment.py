"""BookComment aggregate — shopper comments on a book, held for moderation.

State Machine:
    PENDING → APPROVED | REJECTED
    APPROVED, REJECTED → (terminal)

Only approved comments are shown on the book's detail page.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text

from storefront.comment.events import CommentApproved, CommentPosted, CommentRejected
from storefront.domain import storefront


class CommentStatus(Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ModerationAction(Enum):
    APPROVE = "Approve"
    REJECT = "Reject"


@storefront.aggregate
class BookComment:
    book_id = Integer(required=True)
    member_id = Identifier()  # Empty for anonymous comments
    full_name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    text = Text(required=True)
    status = String(choices=CommentStatus, default=CommentStatus.PENDING.value)
    rejection_reason = String(max_length=500)
    created_at = DateTime()
    moderated_at = DateTime()

    @classmethod
    def post(cls, book_id, full_name, email, text, member_id=None):
        if not (text or "").strip():
            raise ValidationError({"text": ["Comment text cannot be blank"]})

        now = datetime.now(UTC)
        comment = cls(
            book_id=book_id,
            member_id=member_id,
            full_name=full_name,
            email=email,
            text=text,
            status=CommentStatus.PENDING.value,
            created_at=now,
        )
        comment.raise_(
            CommentPosted(
                comment_id=str(comment.id),
                book_id=book_id,
                member_id=member_id,
                posted_at=now,
            )
        )
        return comment

    def _ensure_pending(self):
        if CommentStatus(self.status) != CommentStatus.PENDING:
            raise ValidationError({"status": [f"Comment has already been moderated ({self.status})"]})

    def approve(self):
        self._ensure_pending()
        now = datetime.now(UTC)
        self.status = CommentStatus.APPROVED.value
        self.moderated_at = now
        self.raise_(CommentApproved(comment_id=str(self.id), book_id=self.book_id, moderated_at=now))

    def reject(self, reason=None):
        self._ensure_pending()
        now = datetime.now(UTC)
        self.status = CommentStatus.REJECTED.value
        self.rejection_reason = reason
        self.moderated_at = now
        self.raise_(
            CommentRejected(
                comment_id=str(self.id),
                book_id=self.book_id,
                reason=reason,
                moderated_at=now,
            )
        )
