"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_lookup.adapters.fdc_client import HttpxFdcClient
from calorie_lookup.adapters.supabase_account_repository import (
    SupabaseAccountRepository,
)
from calorie_lookup.config import Settings
from calorie_lookup.services.accounts import AccountService
from calorie_lookup.services.calories import CalorieService
from calorie_lookup.services.lookup import NutritionLookupService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    account_service: AccountService
    calorie_service: CalorieService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    account_service = AccountService(SupabaseAccountRepository(supabase_client))
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        timeout_seconds=resolved_settings.fdc_timeout_seconds,
    )
    calorie_service = CalorieService(NutritionLookupService(fdc_client))

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        account_service=account_service,
        calorie_service=calorie_service,
        close_resources=close_resources,
    )
