"""ODM model for registered accounts."""

from beanie import Document, Indexed
from pydantic import ConfigDict, Field


class Account(Document):
    """
    Registered user account.

    email carries a unique index so duplicate signups are rejected by MongoDB
    itself, not only by the lookup that precedes the insert.
    The hash is stored under "password", the field existing documents in the
    users collection already use.
    role is free text, stored verbatim (e.g. 'patient', 'doctor').
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: Indexed(str, unique=True)
    password_hash: str = Field(alias="password")
    role: str

    class Settings:
        name = "users"
