"""
Pydantic models for auth request validation.
"""

from pydantic import AliasChoices, BaseModel, Field


class SignupRequest(BaseModel):
    """Request body for account creation."""
    fullName: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("fullName", "fullname"),
    )
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Request body for login."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
