"""User schemas."""

from pydantic import BaseModel, Field, field_validator

from ..security import MAX_PASSWORD_BYTES
from .base import CamelModel


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1)

    @field_validator("name", "email")
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("must be an email address")
        return v.lower()

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class LoginRequest(BaseModel):
    email: str
    password: str


class UserIdResponse(CamelModel):
    user_id: int


class UserDelete(CamelModel):
    """Body of DELETE /api/user/delete."""

    user_id: int = Field(gt=0)


class SuccessResponse(BaseModel):
    success: bool = True
