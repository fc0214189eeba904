"""Application tests for member registration."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from storefront.member.credentials import get_store, set_store
from storefront.member.credentials.port import CredentialResult, CredentialStore
from storefront.member.member import Member
from storefront.member.registration import RegisterMember


def _register(**overrides):
    defaults = {
        "username": "reader42",
        "email": "reader42@example.com",
        "full_name": "Leyla Mammadova",
        "password": "Secret123",
    }
    defaults.update(overrides)
    return current_domain.process(RegisterMember(**defaults), asynchronous=False)


class TestRegisterMember:
    def test_registration_persists(self):
        member_id = _register()
        member = current_domain.repository_for(Member).get(member_id)
        assert member.username == "reader42"
        assert member.full_name == "Leyla Mammadova"
        assert member.role == "Member"

    def test_credentials_are_created(self):
        _register()
        assert get_store().usernames == ["reader42"]

    def test_duplicate_username(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(email="other@example.com")
        assert exc.value.messages == {"username": ["UserName already exist"]}

    def test_duplicate_email_ignores_case(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(username="reader43", email="READER42@example.com")
        assert exc.value.messages == {"email": ["Email already exist"]}

    def test_weak_password_is_refused(self):
        with pytest.raises(ValidationError) as exc:
            _register(password="short")
        assert "password" in exc.value.messages
        assert Member.find_by_username("reader42") is None


class _RejectingStore(CredentialStore):
    def create_credentials(self, username, password):
        return CredentialResult(success=False, errors=("Password has been breached.",))


class TestCredentialStoreSwap:
    def test_custom_store_errors_are_reported(self):
        set_store(_RejectingStore())
        with pytest.raises(ValidationError) as exc:
            _register()
        assert exc.value.messages == {"password": ["Password has been breached."]}
