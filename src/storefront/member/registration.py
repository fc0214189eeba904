"""Member registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import logger, storefront
from storefront.member.credentials import get_store
from storefront.member.member import Member


@storefront.command(part_of="Member")
class RegisterMember:
    username = String(required=True, max_length=50)
    email = String(required=True, max_length=254)
    full_name = String(required=True, max_length=100)
    password = String(required=True, max_length=128)


@storefront.command_handler(part_of=Member)
class RegisterMemberHandler:
    @handle(RegisterMember)
    def register_member(self, command):
        if Member.find_by_username(command.username) is not None:
            raise ValidationError({"username": ["UserName already exist"]})

        if Member.email_taken(command.email):
            raise ValidationError({"email": ["Email already exist"]})

        member = Member.register(
            username=command.username,
            email=command.email,
            full_name=command.full_name,
        )

        result = get_store().create_credentials(command.username, command.password)
        if not result.success:
            logger.info("member_registration_refused", username=command.username)
            raise ValidationError({"password": list(result.errors)})

        current_domain.repository_for(Member).add(member)
        logger.info("member_registered", member_id=str(member.id), username=command.username)
        return str(member.id)
