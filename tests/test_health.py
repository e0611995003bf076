"""Health endpoint reports MongoDB connectivity."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient
from pydantic import ValidationError

from careconnect.api.deps import get_mongo_client
from careconnect.core.config import Settings
from careconnect.main import create_app
from careconnect.schemas.health import HealthResponse


class TestHealth(unittest.TestCase):
    def _client(self, mongo_client: MagicMock | None) -> TestClient:
        app = create_app(Settings(APP_ENV="dev"))
        app.dependency_overrides[get_mongo_client] = lambda: mongo_client
        return TestClient(app)

    def test_connected(self) -> None:
        mongo = MagicMock()
        mongo.admin.command = AsyncMock(return_value={"ok": 1})
        resp = self._client(mongo).get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok", "environment": "dev", "database": "connected"})
        mongo.admin.command.assert_awaited_once_with("ping")

    def test_ping_failure_is_disconnected(self) -> None:
        mongo = MagicMock()
        mongo.admin.command = AsyncMock(side_effect=RuntimeError("no server"))
        resp = self._client(mongo).get("/health")
        self.assertEqual(resp.json()["database"], "disconnected")

    def test_no_client_is_disconnected(self) -> None:
        resp = self._client(None).get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["database"], "disconnected")


class TestHealthResponseSchema(unittest.TestCase):
    def test_database_status_is_required(self) -> None:
        with self.assertRaises(ValidationError):
            HealthResponse(environment="dev")

    def test_rejects_unknown_database_status(self) -> None:
        with self.assertRaises(ValidationError):
            HealthResponse(environment="dev", database="degraded")
