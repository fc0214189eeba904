"""ModerateComment — approve or reject a pending comment."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.comment.comment import BookComment, ModerationAction
from storefront.domain import storefront


@storefront.command(part_of="BookComment")
class ModerateComment:
    comment_id = Identifier(required=True)
    action = String(required=True)  # "Approve" or "Reject"
    reason = String(max_length=500)


@storefront.command_handler(part_of=BookComment)
class ModerateCommentHandler:
    @handle(ModerateComment)
    def moderate_comment(self, command):
        try:
            action = ModerationAction(command.action)
        except ValueError:
            raise ValidationError({"action": [f"Unknown moderation action '{command.action}'"]}) from None

        repo = current_domain.repository_for(BookComment)
        comment = repo.get(command.comment_id)

        if action == ModerationAction.APPROVE:
            comment.approve()
        else:
            comment.reject(reason=command.reason)

        repo.add(comment)
