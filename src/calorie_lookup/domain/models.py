"""Domain models for user accounts."""

from dataclasses import dataclass
from uuid import UUID

PLACEHOLDER_TOKEN = "dummy-token-or-jwt"


@dataclass(frozen=True)
class AccountRecord:
    """Represents a registered user stored in the database."""

    id: UUID
    first_name: str
    last_name: str
    name: str
    email: str
    mobile: str | None


@dataclass(frozen=True)
class NewAccount:
    """Registration payload before it is stored."""

    first_name: str
    last_name: str
    email: str
    mobile: str | None
    password: str

    @property
    def name(self) -> str:
        """Display name built from first and last name."""
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of a registration attempt."""

    exists: bool
    account: AccountRecord | None = None


@dataclass(frozen=True)
class SignInResult:
    """Outcome of a sign-in attempt."""

    exists: bool
    token: str | None = None
    account: AccountRecord | None = None
