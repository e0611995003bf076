"""Signup and login routes. Errors are CredentialError subclasses, rendered by the app's exception handler."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from careconnect.api.deps import get_credential_service
from careconnect.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SignupRequest,
)
from careconnect.services.credentials import CredentialService

router = APIRouter()


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    body: SignupRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> MessageResponse:
    """
    Register an account with name, email, password and role.
    All four fields are required; the email must not already be registered.
    """
    await service.signup(
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
    )
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT valid for one hour plus name and role.
    Include the token in the Authorization header as: Bearer <token>
    """
    return await service.login(email=body.email, password=body.password)
