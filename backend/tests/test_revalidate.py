import json
import unittest

from starlette.requests import Request

from beyond_ys.auth import create_access_token
from beyond_ys.collections import CACHE, STAFF_INFO
from beyond_ys.routes.revalidate import revalidate
from beyond_ys.services.page_cache import page_cache

from fakes import InMemoryStore

ADMIN = "Bearer " + create_access_token("uid-admin", "admin")


def make_request(body):
    raw = body if isinstance(body, bytes) else json.dumps(body).encode()

    async def receive():
        return {"type": "http.request", "body": raw, "more_body": False}

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/api/revalidate",
        "headers": [(b"content-type", b"application/json")],
        "query_string": b"",
    }
    return Request(scope, receive)


class BrokenStore(InMemoryStore):
    async def get(self, collection, doc_id):
        raise RuntimeError("connection reset")


class RevalidateRouteTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        page_cache.clear()
        self.store = InMemoryStore(
            {
                STAFF_INFO: {"yuzo-koshiro": {"name": "Yuzo Koshiro"}},
                CACHE: {"staffNames": {"yuzo-koshiro": "Yuzo Koshiro"}},
            }
        )

    def tearDown(self):
        page_cache.clear()

    async def call(self, body, authorization=ADMIN, store=None):
        response = await revalidate(make_request(body), authorization, store or self.store)
        return response.status_code, json.loads(response.body)["message"]

    async def test_success(self):
        status, text = await self.call({"paths": ["/staff", "/staff/yuzo-koshiro"]})
        self.assertEqual((status, text), (200, "Revalidation successful"))
        self.assertIn("/staff/yuzo-koshiro", page_cache)

    async def test_missing_token(self):
        self.assertEqual(await self.call({"paths": ["/staff"]}, None), (401, "Unauthorized"))

    async def test_non_admin_token(self):
        token = "Bearer " + create_access_token("uid-user", "user")
        self.assertEqual(await self.call({"paths": ["/staff"]}, token), (401, "Insufficient permissions"))

    async def test_no_paths(self):
        for body in ({}, {"paths": []}, {"paths": "/staff"}, [], b"not json"):
            self.assertEqual(await self.call(body), (400, "No path provided"))

    async def test_invalid_path(self):
        self.assertEqual(await self.call({"paths": ["/staff", "/admin"]}), (400, "Invalid path"))
        self.assertNotIn("/staff", page_cache)

    async def test_store_failure(self):
        with self.assertLogs("beyond_ys.routes.revalidate", level="ERROR"):
            status, text = await self.call({"paths": ["/staff"]}, store=BrokenStore())
        self.assertEqual((status, text), (500, "Revalidation failed"))


if __name__ == "__main__":
    unittest.main()
