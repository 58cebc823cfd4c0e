"""
Profile Route Tests
===================

Tests for the current user endpoint.

Version: 0.1.0
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException

from shared.auth import User
from services.records.routes.auth import get_me
from tests.conftest import make_row, result_with


class TestCurrentUser:
    """Tests for GET /api/auth/me."""

    @pytest.mark.asyncio
    async def test_profile_with_company_name(self, mock_db_session):
        """The user is returned with their company name."""
        row = make_row(
            id=7,
            company_id=1,
            name="Quality Lead",
            email="qa@majra.test",
            role="admin",
            company_name="Hillside Bakery",
        )
        mock_db_session.execute = AsyncMock(return_value=result_with([row]))

        profile = await get_me(
            current_user=User(id="7", company_id=1),
            company_id=1,
            db=mock_db_session,
        )

        assert profile.company_name == "Hillside Bakery"
        assert mock_db_session.execute.call_args.args[1] == {"user_id": 7, "company_id": 1}

    @pytest.mark.asyncio
    async def test_unknown_user(self, mock_db_session):
        """A token for a deleted user is a 404."""
        mock_db_session.execute = AsyncMock(return_value=result_with([]))

        with pytest.raises(HTTPException) as exc_info:
            await get_me(current_user=User(id="7", company_id=1), company_id=1, db=mock_db_session)

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_non_numeric_subject(self, mock_db_session):
        """Subjects that are not user ids never reach the database."""
        with pytest.raises(HTTPException) as exc_info:
            await get_me(current_user=User(id="svc-account", company_id=1), company_id=1, db=mock_db_session)

        assert exc_info.value.status_code == 404
        mock_db_session.execute.assert_not_called()
