"""
kvstore — Quickstart

Every call is one JSON action posted to the service endpoint.
Point the URL and token at a running service before trying it.
"""

import asyncio
import logging

from kvstore import KVEntry, KVStore, RequestFailedError


async def main():
    logging.basicConfig(level=logging.DEBUG)

    # ──────────────────────────────────────
    #  1. Create the client
    # ──────────────────────────────────────
    kv = KVStore(
        "https://api.example.com/connect",
        {
            "accessToken": "your-token",
            "storeName": "mystore",
            "dbName": "mydb",
        },
    )

    # ──────────────────────────────────────
    #  2. Single keys
    # ──────────────────────────────────────
    await kv.set("user:123", {"name": "John", "age": 30, "active": True})
    user = await kv.get("user:123")
    print(f"  user:123 -> {user}")

    # ──────────────────────────────────────
    #  3. Batches
    # ──────────────────────────────────────
    await kv.set_many(
        [
            KVEntry(key="user:1", value={"name": "Alice"}),
            KVEntry(key="user:2", value={"name": "Bob"}),
        ]
    )
    print(f"  getMany -> {await kv.get_many(['user:1', 'user:2'])}")
    print(f"  keys    -> {await kv.keys()}")

    # ──────────────────────────────────────
    #  4. Errors come back as RequestFailedError
    # ──────────────────────────────────────
    try:
        await kv.get_stores("no-such-db")
    except RequestFailedError as e:
        print(f"  [FAILED] status={e.status_code}  reason={e}")


if __name__ == "__main__":
    asyncio.run(main())
