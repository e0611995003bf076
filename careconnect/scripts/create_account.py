"""
Create an account without going through the HTTP API. Run from project root:
  python -m careconnect.scripts.create_account NAME EMAIL PASSWORD [role]
Example:
  python -m careconnect.scripts.create_account "Ann Lee" ann@example.com your-secure-password doctor
"""
import argparse
import asyncio
import logging
import sys

from careconnect.core.config import get_settings
from careconnect.core.database import init_database
from careconnect.core.errors import CredentialError
from careconnect.core.security import BcryptHasher, TokenIssuer
from careconnect.services.account_store import MongoAccountStore
from careconnect.services.credentials import CredentialService


async def _create(args: argparse.Namespace) -> int:
    settings = get_settings()
    client = await init_database(settings)
    service = CredentialService(
        store=MongoAccountStore(),
        hasher=BcryptHasher(rounds=settings.BCRYPT_ROUNDS),
        tokens=TokenIssuer.from_settings(settings),
    )
    try:
        account = await service.signup(
            name=args.name.strip(),
            email=args.email.strip(),
            password=args.password,
            role=args.role.strip(),
        )
    except CredentialError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        client.close()
    print(f"Created account '{account.email}' with role '{account.role}'.")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a CareConnect account.")
    parser.add_argument("name", help="Display name")
    parser.add_argument("email", help="Email (must not be registered yet)")
    parser.add_argument("password", help="Password")
    parser.add_argument("role", nargs="?", default="patient", help="Role label, stored as given")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    return asyncio.run(_create(args))


if __name__ == "__main__":
    sys.exit(main())
