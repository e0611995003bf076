"""Credential error taxonomy. Each error carries the HTTP status and client-facing message."""


class CredentialError(Exception):
    """Base class for errors raised by the credential operations (signup, login)."""

    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CredentialError):
    """Required input is missing or empty."""

    status_code = 400
    default_message = "All fields (name, email, password, role) are required"


class ConflictError(CredentialError):
    """An account with the given email already exists."""

    status_code = 400
    default_message = "User already exists"


class AuthError(CredentialError):
    """Bad credentials. Same message whether the account is unknown or the password is wrong."""

    status_code = 401
    default_message = "Invalid email or password"


class InternalError(CredentialError):
    """A collaborator (store, hasher, token signer) failed unexpectedly."""

    status_code = 500
    default_message = "Something went wrong"
