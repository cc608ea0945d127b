"""Account registration and sign-in."""

from dataclasses import dataclass
from typing import Protocol

from calorie_lookup.domain.models import (
    PLACEHOLDER_TOKEN,
    AccountRecord,
    NewAccount,
    RegistrationResult,
    SignInResult,
)


class AccountRepository(Protocol):
    """Persistence interface for user accounts."""

    def get_by_email(self, email: str) -> AccountRecord | None:
        """Return the account registered with an email, if present."""

    def get_by_credentials(self, email: str, password: str) -> AccountRecord | None:
        """Return the account matching email and password, if present."""

    def create_account(self, account: NewAccount) -> AccountRecord:
        """Create and return a new account record."""


@dataclass
class AccountService:
    """Application service for account lifecycle actions.

    Passwords are stored and compared as given; hashing and real token
    issuance are not implemented.
    """

    repository: AccountRepository

    def register(self, account: NewAccount) -> RegistrationResult:
        """Create an account unless the email is already taken."""
        if self.repository.get_by_email(account.email):
            return RegistrationResult(exists=True)
        created = self.repository.create_account(account)
        return RegistrationResult(exists=False, account=created)

    def sign_in(self, email: str, password: str) -> SignInResult:
        """Check credentials and return the account with a placeholder token."""
        account = self.repository.get_by_credentials(email, password)
        if account is None:
            return SignInResult(exists=False)
        return SignInResult(exists=True, token=PLACEHOLDER_TOKEN, account=account)
