"""Supabase-backed account repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_lookup.domain.models import AccountRecord, NewAccount
from calorie_lookup.services.accounts import AccountRepository

_COLUMNS = "id, first_name, last_name, name, email, mobile"


@dataclass
class SupabaseAccountRepository(AccountRepository):
    """Supabase implementation for account persistence."""

    client: Client

    def get_by_email(self, email: str) -> AccountRecord | None:
        """Return the account registered with an email, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _row_to_account(response.data[0])
        return None

    def get_by_credentials(self, email: str, password: str) -> AccountRecord | None:
        """Return the account matching email and password, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("email", email)
            .eq("password", password)
            .limit(1)
            .execute()
        )
        if response.data:
            return _row_to_account(response.data[0])
        return None

    def create_account(self, account: NewAccount) -> AccountRecord:
        """Create a new account row and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "first_name": account.first_name,
                    "last_name": account.last_name,
                    "name": account.name,
                    "email": account.email,
                    "mobile": account.mobile,
                    "password": account.password,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _row_to_account(response.data[0])


def _row_to_account(row: dict[str, object]) -> AccountRecord:
    return AccountRecord(
        id=UUID(str(row["id"])),
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
        name=str(row.get("name") or ""),
        email=str(row["email"]),
        mobile=row.get("mobile"),
    )
