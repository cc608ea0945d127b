"""Pydantic models for API request payloads."""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class CalorieRequest(BaseModel):
    """Calorie lookup payload; range checks happen in the validator."""

    dish_name: str | None = None
    # Strict so booleans and numeric strings are rejected, not coerced.
    servings: StrictInt | StrictFloat | None = 1


class RegisterRequest(BaseModel):
    """Account registration payload."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str
    mobile: str | None = None
    password: str


class SignInRequest(BaseModel):
    """Sign-in payload."""

    model_config = ConfigDict(populate_by_name=True)

    email: str
    password: str
    remember_me: bool = Field(default=False, alias="rememberMe")
