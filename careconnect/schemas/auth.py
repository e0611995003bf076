"""Request/response schemas for auth endpoints and the account record passed between layers."""

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """Signup payload. Fields are optional here so missing ones map to a 400, not a 422."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str | None = None
    password: str | None = None


class MessageResponse(BaseModel):
    """Plain confirmation or error message."""

    message: str


class LoginResponse(BaseModel):
    """Signed token plus the account's display name and role."""

    token: str = Field(..., description="JWT access token, valid for one hour")
    name: str
    role: str


class NewAccount(BaseModel):
    """Account to be inserted; password already hashed."""

    name: str
    email: str
    password_hash: str
    role: str


class AccountRecord(NewAccount):
    """Stored account as returned by the account store."""

    id: str
