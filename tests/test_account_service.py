"""Tests for account service."""

from calorie_lookup.domain.models import NewAccount
from calorie_lookup.services.accounts import AccountService
from tests.conftest import InMemoryAccountRepository


def _new_account(email: str = "grace@example.com") -> NewAccount:
    return NewAccount(
        first_name="Grace",
        last_name="Hopper",
        email=email,
        mobile=None,
        password="cobol",
    )


def test_register_creates_account() -> None:
    repository = InMemoryAccountRepository()
    service = AccountService(repository)

    result = service.register(_new_account())

    assert result.exists is False
    assert result.account is not None
    assert result.account.name == "Grace Hopper"
    assert "grace@example.com" in repository.accounts


def test_register_reports_existing_email() -> None:
    repository = InMemoryAccountRepository()
    service = AccountService(repository)
    service.register(_new_account())

    result = service.register(_new_account())

    assert result.exists is True
    assert result.account is None
    assert len(repository.accounts) == 1


def test_name_is_trimmed_without_last_name() -> None:
    account = NewAccount(
        first_name="Cher",
        last_name="",
        email="c@example.com",
        mobile=None,
        password="x",
    )

    assert account.name == "Cher"


def test_sign_in_returns_placeholder_token() -> None:
    repository = InMemoryAccountRepository()
    service = AccountService(repository)
    service.register(_new_account())

    result = service.sign_in("grace@example.com", "cobol")

    assert result.exists is True
    assert result.token == "dummy-token-or-jwt"
    assert result.account is not None
    assert result.account.email == "grace@example.com"


def test_sign_in_rejects_wrong_password() -> None:
    repository = InMemoryAccountRepository()
    service = AccountService(repository)
    service.register(_new_account())

    result = service.sign_in("grace@example.com", "fortran")

    assert result.exists is False
    assert result.token is None
