"""Calorie lookup and account endpoints under /api/auth."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from calorie_lookup.api.models import CalorieRequest, RegisterRequest, SignInRequest
from calorie_lookup.domain.calories import (
    DishNotFound,
    InvalidRequest,
    UpstreamLookupFailure,
)
from calorie_lookup.domain.models import AccountRecord, NewAccount

if TYPE_CHECKING:
    from calorie_lookup.containers import AppContainer

CALORIES_PATH = "/api/auth/getCalories"
INVALID_REQUEST_MESSAGE = "dish_name and valid servings required"
NOT_FOUND_MESSAGE = "Dish not found in USDA database"
INTERNAL_ERROR_MESSAGE = "Internal server error"

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def message_response(status_code: int, message: str) -> JSONResponse:
    """Return a JSON error body of the form {"message": ...}."""
    return JSONResponse(status_code=status_code, content={"message": message})


@router.post("/getCalories", response_model=None)
async def get_calories(
    payload: CalorieRequest, request: Request
) -> dict[str, object] | JSONResponse:
    """Return calories per serving and in total for a dish."""
    container: AppContainer = request.app.state.container
    try:
        result = await container.calorie_service.get_calories(
            payload.dish_name, payload.servings
        )
    except InvalidRequest:
        return message_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)
    except DishNotFound:
        return message_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    except UpstreamLookupFailure:
        _logger.exception("Error fetching calories for dish=%r", payload.dish_name)
        return message_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
        )
    except Exception:
        _logger.exception("Unexpected error fetching calories")
        return message_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
        )
    return asdict(result)


@router.post("/register", response_model=None)
async def register(
    payload: RegisterRequest, request: Request
) -> dict[str, object] | JSONResponse:
    """Register a new account unless the email is already in use."""
    container: AppContainer = request.app.state.container
    try:
        result = container.account_service.register(
            NewAccount(
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                mobile=payload.mobile,
                password=payload.password,
            )
        )
    except Exception:
        _logger.exception("Error registering user")
        return message_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
        )
    if result.exists or result.account is None:
        return {"exists": True}
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"exists": False, "user": _account_payload(result.account)},
    )


@router.post("/signin", response_model=None)
async def sign_in(
    payload: SignInRequest, request: Request
) -> dict[str, object] | JSONResponse:
    """Check credentials and return the user with a placeholder token."""
    container: AppContainer = request.app.state.container
    try:
        result = container.account_service.sign_in(payload.email, payload.password)
    except Exception:
        _logger.exception("Error during sign-in")
        return message_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
        )
    if not result.exists or result.account is None:
        return {"exists": False}
    return {
        "exists": True,
        "token": result.token,
        "user": {"name": result.account.name, "email": result.account.email},
    }


def _account_payload(account: AccountRecord) -> dict[str, object]:
    return {
        "id": str(account.id),
        "firstName": account.first_name,
        "lastName": account.last_name,
        "name": account.name,
        "email": account.email,
        "mobile": account.mobile,
    }
