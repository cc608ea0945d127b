"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from calorie_lookup.adapters.fdc_client import FdcClient
from calorie_lookup.config import Settings
from calorie_lookup.containers import AppContainer
from calorie_lookup.domain.models import AccountRecord, NewAccount
from calorie_lookup.services.accounts import AccountRepository, AccountService
from calorie_lookup.services.calories import CalorieService
from calorie_lookup.services.lookup import NutritionLookupService


def label_food(value: float, fdc_id: int = 2345678) -> dict[str, object]:
    """Branded-style FDC payload carrying label calories."""
    return {
        "fdcId": fdc_id,
        "description": "Chicken Tikka Masala",
        "dataType": "Branded",
        "servingSize": 283,
        "servingSizeUnit": "g",
        "labelNutrients": {"calories": {"value": value}},
        "foodNutrients": [
            {"nutrientNumber": "208", "amount": 999},
        ],
    }


def nutrient_table_food(
    kcal_per_100g: float | None, serving_size_g: float | None = None
) -> dict[str, object]:
    """FDC payload with only the nutrient table."""
    nutrients: list[dict[str, object]] = [
        {"nutrientNumber": "203", "amount": 31.0},
        {"nutrientNumber": "204", "amount": 3.6},
    ]
    if kcal_per_100g is not None:
        nutrients.append({"nutrientNumber": "208", "amount": kcal_per_100g})
    payload: dict[str, object] = {
        "fdcId": 171077,
        "description": "Chicken, broilers or fryers, breast, roasted",
        "dataType": "SR Legacy",
        "foodNutrients": nutrients,
    }
    if serving_size_g is not None:
        payload["servingSize"] = serving_size_g
    return payload


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses that records calls."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "totalHits": 1,
            "foods": [{"fdcId": 171077, "description": "Chicken breast, roasted"}],
        }
    )
    food_payload: dict[str, object] = field(
        default_factory=lambda: nutrient_table_food(165, serving_size_g=150)
    )
    search_error: Exception | None = None
    food_error: Exception | None = None
    search_calls: list[tuple[str, int]] = field(default_factory=list)
    food_calls: list[int] = field(default_factory=list)

    async def search_foods(self, query: str, page_size: int = 1) -> dict[str, object]:
        self.search_calls.append((query, page_size))
        if self.search_error is not None:
            raise self.search_error
        return self.search_payload

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls.append(fdc_id)
        if self.food_error is not None:
            raise self.food_error
        return self.food_payload


@dataclass
class InMemoryAccountRepository(AccountRepository):
    """In-memory account repository for tests."""

    accounts: dict[str, AccountRecord] = field(default_factory=dict)
    passwords: dict[str, str] = field(default_factory=dict)
    fail_with: Exception | None = None

    def get_by_email(self, email: str) -> AccountRecord | None:
        if self.fail_with is not None:
            raise self.fail_with
        return self.accounts.get(email)

    def get_by_credentials(self, email: str, password: str) -> AccountRecord | None:
        if self.fail_with is not None:
            raise self.fail_with
        if self.passwords.get(email) != password:
            return None
        return self.accounts.get(email)

    def create_account(self, account: NewAccount) -> AccountRecord:
        record = AccountRecord(
            id=uuid4(),
            first_name=account.first_name,
            last_name=account.last_name,
            name=account.name,
            email=account.email,
            mobile=account.mobile,
        )
        self.accounts[account.email] = record
        self.passwords[account.email] = account.password
        return record


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        fdc_api_key="fdc-key",
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def account_repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def container(
    settings: Settings,
    fdc_client: FakeFdcClient,
    account_repository: InMemoryAccountRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        account_service=AccountService(account_repository),
        calorie_service=CalorieService(NutritionLookupService(fdc_client)),
        close_resources=close_resources,
    )
