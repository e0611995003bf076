"""Credential service: account signup and login with token issuance."""

import logging
from typing import Protocol

from fastapi.concurrency import run_in_threadpool

from careconnect.core.errors import (
    AuthError,
    ConflictError,
    CredentialError,
    InternalError,
    ValidationError,
)
from careconnect.schemas.auth import AccountRecord, LoginResponse, NewAccount

logger = logging.getLogger(__name__)


class AccountStore(Protocol):
    """Persistence capability. insert must raise ConflictError on a duplicate email."""

    async def find_by_email(self, email: str) -> AccountRecord | None: ...

    async def insert(self, account: NewAccount) -> AccountRecord: ...


class PasswordHasher(Protocol):
    def hash(self, plain_password: str) -> str: ...

    def verify(self, plain_password: str, hashed: str) -> bool: ...


class TokenSigner(Protocol):
    def issue(self, account_id: str, role: str) -> str: ...


class CredentialService:
    """
    Account creation and authentication.

    Collaborators are injected so the service runs against fakes in tests.
    Hashing is CPU-bound and runs in the threadpool to keep the event loop free.
    """

    def __init__(
        self,
        store: AccountStore,
        hasher: PasswordHasher,
        tokens: TokenSigner,
    ) -> None:
        self.store = store
        self.hasher = hasher
        self.tokens = tokens
        self._unknown_account_hash: str | None = None

    async def _dummy_hash(self) -> str:
        """Hash (computed once, same cost factor) to verify against when no account matches."""
        if self._unknown_account_hash is None:
            self._unknown_account_hash = await run_in_threadpool(
                self.hasher.hash, "unknown-account-placeholder"
            )
        return self._unknown_account_hash

    async def signup(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        role: str | None,
    ) -> AccountRecord:
        """
        Register a new account.

        Raises ValidationError if any field is missing or empty (before touching
        the store or hasher), ConflictError if the email is taken, InternalError
        on any other failure.
        """
        if not name or not email or not password or not role:
            raise ValidationError()

        try:
            if await self.store.find_by_email(email) is not None:
                raise ConflictError()
            password_hash = await run_in_threadpool(self.hasher.hash, password)
            # The store's unique index is authoritative if a concurrent signup won the race.
            account = await self.store.insert(
                NewAccount(name=name, email=email, password_hash=password_hash, role=role)
            )
        except CredentialError:
            raise
        except Exception as e:
            logger.exception("Signup failed")
            raise InternalError() from e

        logger.info("Account registered", extra={"account_id": account.id, "role": account.role})
        return account

    async def login(self, email: str | None, password: str | None) -> LoginResponse:
        """
        Authenticate by email and password and issue a session token.

        Raises AuthError (same message for unknown email and wrong password),
        InternalError on collaborator failure.
        """
        if not email or not password:
            raise AuthError()

        try:
            account = await self.store.find_by_email(email)
            if account is None:
                # Spend the same bcrypt work as a wrong password so timing does not reveal the miss
                await run_in_threadpool(self.hasher.verify, password, await self._dummy_hash())
                raise AuthError()
            if not await run_in_threadpool(self.hasher.verify, password, account.password_hash):
                raise AuthError()
            token = self.tokens.issue(account.id, account.role)
        except CredentialError:
            raise
        except Exception as e:
            logger.exception("Login failed")
            raise InternalError() from e

        return LoginResponse(token=token, name=account.name, role=account.role)
