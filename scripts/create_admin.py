#!/usr/bin/env python3
"""Create an admin account for the CMS dashboard.

Reads DATABASE_URL and JWT_SECRET from the environment (or .env) like the
API does. The password is prompted for unless --password is given.

Usage:
    python scripts/create_admin.py --username admin1 --email a@example.com
    python scripts/create_admin.py --username admin1 --email a@example.com --create-tables
"""

import argparse
import asyncio
import getpass
import sys

from pydantic import ValidationError

from app.core import Database, settings
from app.core.exceptions import ConflictError
from app.schemas.auth import AdminCreateRequest
from app.services.auth import AuthService


async def _create(data: AdminCreateRequest, create_tables: bool) -> None:
    database = Database(settings.database_url)
    await database.connect()
    try:
        if create_tables:
            await database.create_all()
        async with database.session() as session:
            admin = await AuthService(session).create_admin(
                data.username, data.email, data.password
            )
            await session.commit()
        print(f"Created admin {admin.username} <{admin.email}> (id={admin.id})")
    finally:
        await database.disconnect()


def main():
    parser = argparse.ArgumentParser(description="Create a CMS admin account")
    parser.add_argument("--username", required=True, help="3-20 characters")
    parser.add_argument("--email", required=True, help="Login email, stored lowercased")
    parser.add_argument("--password", help="Omit to be prompted")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables first (local development without Alembic)",
    )
    args = parser.parse_args()

    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")
        if getpass.getpass("Repeat password: ") != password:
            print("ERROR: Passwords do not match.")
            sys.exit(1)

    try:
        data = AdminCreateRequest(username=args.username, email=args.email, password=password)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"ERROR: {field}: {error['msg']}")
        sys.exit(1)

    try:
        asyncio.run(_create(data, args.create_tables))
    except ConflictError as e:
        print(f"ERROR: {e.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
