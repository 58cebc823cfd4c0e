"""
Test Configuration
==================

Pytest fixtures for Majra tests.
"""

import os
from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["POSTGRES_AUTO_CREATE_SCHEMA"] = "false"


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest_asyncio.fixture
async def records_client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the Records Service."""
    from services.records.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """Mock database session."""
    return AsyncMock()


def make_row(**values: Any) -> MagicMock:
    """Mock a SQLAlchemy result row exposing ``_mapping`` and attributes."""
    row = MagicMock()
    for key, value in values.items():
        setattr(row, key, value)
    row._mapping = values
    return row


def result_with(rows: list[MagicMock] | None = None, scalar: int | None = None) -> MagicMock:
    """Mock an execute() result returning the given rows."""
    rows = rows or []
    return MagicMock(
        fetchall=lambda: rows,
        fetchone=lambda: rows[0] if rows else None,
        scalar=lambda: scalar,
        rowcount=len(rows),
    )


@pytest.fixture
def sample_audit_data() -> dict[str, Any]:
    """Sample audit request body, as sent by the browser client."""
    return {
        "title": "Quarterly GMP inspection",
        "area": "Packing",
        "standard": "BRCGS Food",
        "section": "4.11",
        "auditor": "J. Okafor",
        "auditDate": "2024-03-01",
        "severity": "major",
        "dueDate": "2024-03-15",
        "responsiblePerson": "Line manager",
        "findings": "Broken strip curtain at dispatch door",
    }


@pytest.fixture
def sample_complaint_data() -> dict[str, Any]:
    """Sample complaint request body."""
    return {
        "dateReceived": "2024-02-10",
        "customerName": "A. Customer",
        "productName": "Sourdough loaf 800g",
        "complaintType": "Foreign body",
        "contaminationType": "Plastic",
        "description": "Blue plastic fragment found in slice",
    }


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Generate test authentication headers for company 1."""
    from shared.auth import create_access_token

    token = create_access_token({
        "sub": "7",
        "company_id": 1,
        "email": "qa@majra.test",
        "role": "admin",
    })
    return {"Authorization": f"Bearer {token}"}
