# scripts/manage_users.py

import asyncio
import argparse
from menucost.db import async_session
from menucost.crud import user as user_crud
from menucost.core.constants import ROLE_PRECEDENCE
from menucost.core.errors import NotFoundError


async def add_user(user_id: str, full_name: str = None, email: str = None, role: str = None):
    async with async_session() as session:
        if await user_crud.get_profile(session, user_id):
            print(f"⚠️  Profile '{user_id}' already exists. Skipping create.")
        else:
            await user_crud.create_profile(session, user_id, full_name, email)
            print(f"✅ Created profile: {user_id} ({full_name or 'no name'})")

        if role:
            await user_crud.set_user_role(session, user_id, role)
            print(f"🔐 Role set: {user_id} -> {role}")


async def set_role(user_id: str, role: str = None):
    async with async_session() as session:
        try:
            await user_crud.set_user_role(session, user_id, role)
        except NotFoundError as e:
            print(f"❌ {e.message}: {user_id}")
            return
        print(f"🔐 Role {'set to ' + role if role else 'cleared'} for {user_id}")


async def list_users():
    async with async_session() as session:
        for u in await user_crud.get_users(session):
            print(f"{u['id']:<38} {u['full_name'] or '-':<24} {u['role'] or '-'}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Manage menu cost users")
    parser.add_argument("--add", action="store_true", help="Create a profile")
    parser.add_argument("--set-role", action="store_true", help="Replace the roles of a user")
    parser.add_argument("--clear-role", action="store_true", help="Remove every role of a user")
    parser.add_argument("--list", action="store_true", help="List users with their role")
    parser.add_argument("--id", type=str, help="User id issued by the identity provider")
    parser.add_argument("--name", type=str, help="Full name")
    parser.add_argument("--email", type=str, help="Email")
    parser.add_argument("--role", type=str, choices=ROLE_PRECEDENCE, help="Role to grant")

    args = parser.parse_args()

    if args.list:
        asyncio.run(list_users())
    elif args.add and args.id:
        asyncio.run(add_user(args.id, args.name, args.email, args.role))
    elif args.set_role and args.id and args.role:
        asyncio.run(set_role(args.id, args.role))
    elif args.clear_role and args.id:
        asyncio.run(set_role(args.id, None))
    else:
        print("❗ Usage:")
        print("  python -m scripts.manage_users --list")
        print("  python -m scripts.manage_users --add --id <uid> --name 'Ana Souza' --role pcp")
        print("  python -m scripts.manage_users --set-role --id <uid> --role admin")
        print("  python -m scripts.manage_users --clear-role --id <uid>")
