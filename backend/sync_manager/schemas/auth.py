"""
Auth gate schemas.
"""

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    """Request body for unlocking the UI."""

    model_config = ConfigDict(json_schema_extra={"examples": [{"password": "secret"}]})

    password: str


class AuthStatus(BaseModel):
    is_authenticated: bool
