"""
Records Application Tests
=========================

HTTP-level tests for authentication, error envelopes and health checks.

Version: 0.1.0
"""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, patch

import pytest

from shared.auth import create_access_token
from shared.database.postgres import get_postgres_session
from tests.conftest import result_with


@pytest.fixture
def override_db(mock_db_session):
    """Route database sessions to the mock session."""
    from services.records.main import app

    async def _session() -> AsyncGenerator[AsyncMock, None]:
        yield mock_db_session

    app.dependency_overrides[get_postgres_session] = _session
    yield mock_db_session
    app.dependency_overrides.clear()


class TestAuthentication:
    """Tests for bearer token handling."""

    @pytest.mark.asyncio
    async def test_missing_token(self, records_client):
        """Requests without a token are rejected."""
        response = await records_client.get("/api/audits")

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": "No token provided.",
            "status_code": 401,
        }
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_invalid_token(self, records_client):
        """Tampered tokens are rejected."""
        response = await records_client.get(
            "/api/complaints",
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid or expired token."

    @pytest.mark.asyncio
    async def test_token_without_company(self, records_client, override_db):
        """A token that carries no company cannot reach records."""
        token = create_access_token({"sub": "7"})

        response = await records_client.get(
            "/api/suppliers",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Current user has no company assigned"
        override_db.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_legacy_company_claim(self, records_client, override_db):
        """Older tokens with a camelCase company claim still work."""
        override_db.execute = AsyncMock(return_value=result_with([]))
        token = create_access_token({"sub": "7", "companyId": 3})

        response = await records_client.get(
            "/api/training",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 200
        assert response.json() == {"training_records": []}
        assert override_db.execute.call_args.args[1]["company_id"] == 3


class TestScoreEndpoint:
    """Tests for the overall score over HTTP."""

    @pytest.mark.asyncio
    async def test_empty_company(self, records_client, override_db, auth_headers):
        """No audits gives a null score rather than zero."""
        override_db.execute = AsyncMock(return_value=result_with([]))

        response = await records_client.get("/api/audits/score/overall", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["overall_score"] is None
        assert body["by_area"] == []

    @pytest.mark.asyncio
    async def test_unknown_method(self, records_client, override_db, auth_headers):
        """Only known scoring methods are accepted."""
        response = await records_client.get(
            "/api/audits/score/overall",
            params={"method": "average"},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert response.json()["success"] is False


class TestValidationErrors:
    """Tests for request validation envelopes."""

    @pytest.mark.asyncio
    async def test_bad_date(self, records_client, override_db, auth_headers, sample_audit_data):
        """Non-ISO dates are rejected before reaching the database."""
        sample_audit_data["dueDate"] = "15/03/2024"

        response = await records_client.post(
            "/api/audits",
            json=sample_audit_data,
            headers=auth_headers,
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "Invalid request"
        assert body["details"]["errors"]
        override_db.execute.assert_not_called()


class TestHealth:
    """Tests for health endpoints."""

    @pytest.mark.asyncio
    async def test_health_healthy(self, records_client):
        """Healthy database gives a healthy service."""
        with patch(
            "services.records.main.PostgresClient.health_check",
            AsyncMock(return_value={"status": "healthy", "latency_ms": 1.2}),
        ):
            response = await records_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "records"

    @pytest.mark.asyncio
    async def test_health_degraded(self, records_client):
        """Unreachable database degrades the service."""
        with patch(
            "services.records.main.PostgresClient.health_check",
            AsyncMock(return_value={"status": "unhealthy", "error": "refused"}),
        ):
            response = await records_client.get("/health")

        assert response.json()["status"] == "degraded"

    @pytest.mark.asyncio
    async def test_root(self, records_client):
        """Root describes the service."""
        response = await records_client.get("/")

        assert response.json()["service"] == "Majra Records Service"
