"""
Set a user's role and print a freshly signed token carrying it.

Usage:
    cd backend
    python -m scripts.set_user_role <uid> <role>
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from beyond_ys.auth import create_access_token
from beyond_ys.collections import USERS
from beyond_ys.db_mongo import close_db, get_database
from beyond_ys.models import User


async def set_user_role(uid: str, role: str) -> str:
    user = User(username=uid, role=role)
    now = datetime.now(timezone.utc)
    db = get_database()
    await db[USERS].update_one(
        {"_id": uid},
        {
            "$set": {"role": user.role, "updatedAt": now},
            "$setOnInsert": {"username": user.username, "createdAt": now},
        },
        upsert=True,
    )
    return create_access_token(uid, user.role)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Set a user's role")
    parser.add_argument("uid")
    parser.add_argument("role", choices=["admin", "user"])
    return parser.parse_args()


async def main() -> None:
    args = parse_args()
    try:
        token = await set_user_role(args.uid, args.role)
    finally:
        await close_db()
    print(f"User {args.uid} has been set to role {args.role}.")
    print(f"Token: {token}")


if __name__ == "__main__":
    asyncio.run(main())
