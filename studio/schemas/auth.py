"""Auth schemas."""
from pydantic import EmailStr, Field

from studio.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    email: EmailStr
    username: str = Field(min_length=3, max_length=20)
    password: str = Field(min_length=6)
    first_name: str | None = None
    last_name: str | None = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6)
