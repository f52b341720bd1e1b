#!/usr/bin/env python3
"""
Tests for the HTTP front end.
"""

import unittest

from aiohttp.test_utils import AioHTTPTestCase

from dns_token_broker.core.binding_manager import BindingManager
from dns_token_broker.providers import TransactionExecutor
from dns_token_broker.server.http_app import create_app
from dns_token_broker.storage import MemoryBindingStore


class TestHTTPApp(AioHTTPTestCase):
    """Test routing, field extraction and status mapping."""

    async def get_application(self):
        self.executor = TransactionExecutor({"default_provider": "mock"})
        self.manager = BindingManager(
            {"ddns": {"zone": "example.com.", "server": "127.0.0.1"}},
            store=MemoryBindingStore(),
            executor=self.executor,
        )
        return create_app(self.manager)

    async def _create(self, hostname="myhost"):
        resp = await self.client.get("/create", params={"hostname": hostname})
        self.assertEqual(resp.status, 200)
        return (await resp.json())["token"]

    async def test_create_via_query(self):
        """Test GET /create returns a token."""
        resp = await self.client.get("/create", params={"hostname": "myhost"})

        self.assertEqual(resp.status, 200)
        body = await resp.json()
        self.assertIsNone(body["error"])
        self.assertEqual(len(body["token"]), 32)

    async def test_create_via_form(self):
        """Test POST /create reads the form body."""
        resp = await self.client.post("/create", data={"hostname": "formhost"})

        self.assertEqual(resp.status, 200)
        self.assertTrue(self.manager.store.exists_hostname("formhost"))

    async def test_create_conflict(self):
        """Test a second claim answers 400."""
        await self._create()
        resp = await self.client.get("/create", params={"hostname": "myhost"})

        self.assertEqual(resp.status, 400)
        self.assertEqual(await resp.json(), {"error": "Hostname already exists"})

    async def test_create_missing_hostname(self):
        """Test an absent hostname answers 400."""
        resp = await self.client.get("/create")

        self.assertEqual(resp.status, 400)
        self.assertEqual(await resp.json(), {"error": "You must provide hostname"})

    async def test_update_with_ip(self):
        """Test /update with an explicit address."""
        token = await self._create()
        resp = await self.client.get("/update", params={"token": token, "ip": "203.0.113.5"})

        self.assertEqual(resp.status, 200)
        self.assertEqual(await resp.json(), {"error": None, "a": "203.0.113.5"})

    async def test_update_uses_real_ip_header(self):
        """Test /update falls back to X-Real-IP."""
        token = await self._create()
        resp = await self.client.post(
            "/update", data={"token": token}, headers={"X-Real-IP": "2001:db8::7"}
        )

        self.assertEqual(resp.status, 200)
        self.assertEqual(await resp.json(), {"error": None, "aaaa": "2001:db8::7"})

    async def test_update_uses_peer_address(self):
        """Test /update falls back to the connecting address."""
        token = await self._create()
        resp = await self.client.get("/update", params={"token": token})

        self.assertEqual(resp.status, 200)
        body = await resp.json()
        self.assertEqual(body["a"], "127.0.0.1")

    async def test_delete_then_update(self):
        """Test a deleted token can no longer update."""
        token = await self._create()

        resp = await self.client.post("/delete", data={"token": token})
        self.assertEqual(resp.status, 200)
        self.assertEqual(await resp.json(), {"error": None})

        resp = await self.client.get("/update", params={"token": token, "ip": "203.0.113.5"})
        self.assertEqual(resp.status, 400)
        self.assertEqual(await resp.json(), {"error": "Invalid token"})

    async def test_execution_failure(self):
        """Test an agent failure answers 400."""
        token = await self._create()
        self.executor.agent.fail = True

        resp = await self.client.get("/update", params={"token": token, "ip": "203.0.113.5"})

        self.assertEqual(resp.status, 400)
        self.assertIn("exited with code 1", (await resp.json())["error"])

    async def test_unknown_path(self):
        """Test unrouted paths answer 400."""
        resp = await self.client.get("/status")

        self.assertEqual(resp.status, 400)
        self.assertEqual(await resp.json(), {"error": "Invalid URL"})


if __name__ == "__main__":
    unittest.main()
