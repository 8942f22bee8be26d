"""
User and Token Pydantic Schemas

- UserCredentials: body of login (no length limits, so every bad login
  is the same 401)
- UserRegister: body of register, limited to what the users table stores
- UserRead: public user data (never exposes the password digest)
- TokenResponse: login result
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserCredentials(BaseModel):
    """
    Username and password sent to /auth/login.

    Both default to empty strings; the auth service decides what an
    empty value means (a 400 on register, a 401 on login).
    """

    username: str = Field(default="", description="Login name", examples=["admin"])
    password: str = Field(default="", description="Plain text password", examples=["Pa$$w0rd"])


class UserRegister(UserCredentials):
    """Username and password sent to /auth/register."""

    username: str = Field(
        default="",
        max_length=50,
        description="Login name",
        examples=["admin"],
    )

    password: str = Field(
        default="",
        max_length=128,
        description="Plain text password",
        examples=["Pa$$w0rd"],
    )


class UserRead(BaseModel):
    """Schema for user responses."""

    id: int = Field(..., description="Unique user identifier", examples=[1])
    username: str = Field(..., description="Login name", examples=["admin"])

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    """
    Schema for a successful login.

    Include the token in the Authorization header:
        Authorization: Bearer <token>
    """

    token: str = Field(..., description="Signed JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
