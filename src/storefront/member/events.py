"""Domain events for the Member aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Member")
class MemberRegistered:
    """A shopper created a member account."""

    __version__ = 1

    member_id = Identifier(required=True)
    username = String(required=True)
    email = String(required=True)
    full_name = String(required=True)
    registered_at = DateTime(required=True)
