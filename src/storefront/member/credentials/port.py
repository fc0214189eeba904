"""Credential store port.

Password hashing and sign-in belong to an external identity provider. The
storefront only asks it to create credentials for a new member and reads
back whether the password was accepted.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CredentialResult:
    success: bool
    errors: tuple[str, ...] = field(default_factory=tuple)


class CredentialStore(ABC):
    @abstractmethod
    def create_credentials(self, username: str, password: str) -> CredentialResult:
        """Store credentials for ``username``, or report why the password was refused."""
        ...
