"""In-process credential store for development and testing.

Applies the default password policy of the identity provider the storefront
runs behind and remembers which usernames were given credentials. Nothing is
hashed or persisted.
"""

from storefront.member.credentials.port import CredentialResult, CredentialStore

MIN_PASSWORD_LENGTH = 8


class FakeCredentialStore(CredentialStore):
    def __init__(self) -> None:
        self.usernames: list[str] = []

    def create_credentials(self, username: str, password: str) -> CredentialResult:
        errors = []
        if len(password) < MIN_PASSWORD_LENGTH:
            errors.append(f"Passwords must be at least {MIN_PASSWORD_LENGTH} characters.")
        if not any(c.isdigit() for c in password):
            errors.append("Passwords must have at least one digit ('0'-'9').")
        if not any(c.isupper() for c in password):
            errors.append("Passwords must have at least one uppercase ('A'-'Z').")

        if errors:
            return CredentialResult(success=False, errors=tuple(errors))

        self.usernames.append(username)
        return CredentialResult(success=True)
