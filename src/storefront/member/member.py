"""Member aggregate — a registered shopper.

Credentials live in an external credential store (see
``storefront.member.credentials``); this aggregate only keeps the profile.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.member.events import MemberRegistered
from storefront.shared.email import checked_email

MEMBER_ROLE = "Member"


@storefront.aggregate
class Member:
    username = String(required=True, max_length=50)
    email = String(required=True, max_length=254)
    normalized_email = String(required=True, max_length=254)
    full_name = String(required=True, max_length=100)
    role = String(max_length=30, default=MEMBER_ROLE)
    registered_at = DateTime()

    @classmethod
    def register(cls, username, email, full_name):
        email = checked_email(email)
        now = datetime.now(UTC)
        member = cls(
            username=username,
            email=email,
            normalized_email=email.upper(),
            full_name=full_name,
            role=MEMBER_ROLE,
            registered_at=now,
        )
        member.raise_(
            MemberRegistered(
                member_id=str(member.id),
                username=username,
                email=email,
                full_name=full_name,
                registered_at=now,
            )
        )
        return member

    @classmethod
    def find_by_username(cls, username):
        found = current_domain.repository_for(cls)._dao.query.filter(username=username).all().items
        return found[0] if found else None

    @classmethod
    def email_taken(cls, email) -> bool:
        found = current_domain.repository_for(cls)._dao.query.filter(normalized_email=email.upper()).all()
        return bool(found.items)
