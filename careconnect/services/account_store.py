"""MongoDB-backed account store (Beanie)."""

from pymongo.errors import DuplicateKeyError

from careconnect.core.errors import ConflictError
from careconnect.models import Account
from careconnect.schemas.auth import AccountRecord, NewAccount


def _to_record(doc: Account) -> AccountRecord:
    return AccountRecord(
        id=str(doc.id),
        name=doc.name,
        email=doc.email,
        password_hash=doc.password_hash,
        role=doc.role,
    )


class MongoAccountStore:
    """
    Account persistence on the "users" collection.

    Requires init_database to have run (Beanie must know the Account model).
    """

    async def find_by_email(self, email: str) -> AccountRecord | None:
        doc = await Account.find_one(Account.email == email)
        if doc is None:
            return None
        return _to_record(doc)

    async def insert(self, account: NewAccount) -> AccountRecord:
        """
        Insert a new account.

        Raises ConflictError if the unique index on email rejects the document.
        """
        doc = Account(**account.model_dump())
        try:
            await doc.insert()
        except DuplicateKeyError as e:
            raise ConflictError() from e
        return _to_record(doc)
