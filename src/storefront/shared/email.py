"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront

FORBIDDEN_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@storefront.value_object
class EmailAddress:
    """A structurally valid email address.

    Exactly one @, non-empty local and domain parts, a dotted domain without
    leading or trailing dots and hyphens, no consecutive dots, no whitespace
    and no forbidden characters. Bracketed IP literals are accepted as domains.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address

        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            raise ValueError(f"Invalid email address: {email!r}")

        local_part, domain_part = email.split("@", 1)
        ip_literal = domain_part.startswith("[") and domain_part.endswith("]")

        for part in (local_part, domain_part):
            if not part or part.startswith(".") or part.endswith(".") or ".." in part:
                raise ValueError(f"Invalid email address: {email!r}")

        if not ip_literal:
            if "." not in domain_part:
                raise ValueError(f"Invalid email address: {email!r}")
            for label in domain_part.split("."):
                if label.startswith("-") or label.endswith("-"):
                    raise ValueError(f"Invalid email address: {email!r}")

        for forbidden in FORBIDDEN_CHARACTERS:
            if forbidden in email and not (forbidden in "[]" and ip_literal):
                raise ValueError(f"Invalid email address: {email!r}")


def checked_email(address, field="email"):
    """Return the address if it is valid, else raise a ValidationError keyed on ``field``."""
    try:
        return EmailAddress(address=address).address
    except (ValueError, ValidationError):
        raise ValidationError({field: ["Email address is not valid"]}) from None
