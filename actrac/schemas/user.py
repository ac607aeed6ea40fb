"""
User Pydantic schemas.
Covers registration, login, and the public user shape. The password hash
never appears in any read schema.
"""
from __future__ import annotations

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, EmailStr, Field, field_validator

MIN_PASSWORD_LENGTH = 6


# ── Create ────────────────────────────────────────────────────────────────────

class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(max_length=128)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("password", mode="before")
    @classmethod
    def require_password(cls, v: object) -> object:
        if isinstance(v, str) and len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        return v


# ── Login ─────────────────────────────────────────────────────────────────────

class LoginRequest(BaseModel):
    # Not EmailStr: a malformed address falls through to "invalid credentials".
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Apply the same normalization EmailStr applies at registration."""
        try:
            return validate_email(v, check_deliverability=False).normalized
        except EmailNotValidError:
            return v


# ── Read ──────────────────────────────────────────────────────────────────────

class UserRead(BaseModel):
    """Public identity attached to requests and returned to clients."""

    id: int
    username: str
    email: str

    model_config = {"from_attributes": True}


class RegisterResponse(UserRead):
    message: str = "User registered successfully"


class LoginResponse(BaseModel):
    user: UserRead
    message: str = "Login successful"
