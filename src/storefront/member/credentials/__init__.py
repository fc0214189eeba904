"""Credential store factory.

get_store() / set_store() swap the implementation; FakeCredentialStore is the
default until a real identity provider adapter is installed.
"""

from storefront.member.credentials.fake_store import FakeCredentialStore
from storefront.member.credentials.port import CredentialStore

_current_store: CredentialStore | None = None


def get_store() -> CredentialStore:
    global _current_store
    if _current_store is None:
        _current_store = FakeCredentialStore()
    return _current_store


def set_store(store: CredentialStore) -> None:
    global _current_store
    _current_store = store


def reset_store() -> None:
    global _current_store
    _current_store = None
