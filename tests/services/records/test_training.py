"""
Training Routes Tests
=====================

Tests for training record API endpoints.

Version: 0.1.0
"""

from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from shared.models.training import TrainingCreate, TrainingUpdate
from services.records.routes.training import (
    create_training,
    get_training_stats,
    list_training,
    update_training,
)
from tests.conftest import make_row, result_with


@pytest.fixture
def training_row():
    """Stored training row."""
    return make_row(
        id=3,
        company_id=1,
        employee_name="Sam Patel",
        training_topic="Level 2 Food Hygiene",
        department="Production",
        status="Planned",
        due_date="2024-07-01",
        validity_months=36,
    )


class TestTrainingValidation:
    """Tests for training request models."""

    def test_defaults_to_planned(self):
        """Training without a status is planned."""
        training = TrainingCreate.model_validate(
            {"employeeName": "Sam Patel", "trainingTopic": "HACCP", "status": ""}
        )

        assert training.status == "Planned"

    def test_negative_validity_rejected(self):
        """Validity cannot be negative."""
        with pytest.raises(ValidationError):
            TrainingCreate(employee_name="Sam", training_topic="HACCP", validity_months=-1)


class TestTrainingRoutes:
    """Tests for training endpoints."""

    @pytest.mark.asyncio
    async def test_list_by_due_date(self, mock_db_session, training_row):
        """Training is listed by due date then employee."""
        mock_db_session.execute = AsyncMock(return_value=result_with([training_row]))

        result = await list_training(
            status_filter=None,
            department="Production",
            company_id=1,
            db=mock_db_session,
        )

        sql, params = mock_db_session.execute.call_args.args
        assert "ORDER BY due_date ASC, employee_name ASC" in str(sql)
        assert params == {"company_id": 1, "department": "Production"}
        assert result.training_records[0].validity_months == 36

    @pytest.mark.asyncio
    async def test_create(self, mock_db_session, training_row):
        """Training records are created for the caller's company."""
        mock_db_session.execute = AsyncMock(return_value=result_with([training_row]))
        training = TrainingCreate(employee_name="Sam Patel", training_topic="Level 2 Food Hygiene")

        result = await create_training(training=training, company_id=1, db=mock_db_session)

        assert mock_db_session.execute.call_args.args[1]["status"] == "Planned"
        assert result.training.id == 3

    @pytest.mark.asyncio
    async def test_update_drops_null_required(self, mock_db_session, training_row):
        """Null employee name or topic are not written."""
        mock_db_session.execute = AsyncMock(return_value=result_with([training_row]))
        update = TrainingUpdate.model_validate(
            {"employeeName": None, "trainingTopic": None, "completionDate": "2024-06-20"}
        )

        await update_training(training_id=3, update=update, company_id=1, db=mock_db_session)

        params = mock_db_session.execute.call_args.args[1]
        assert "employee_name" not in params
        assert "training_topic" not in params
        assert params["completion_date"] == "2024-06-20"

    @pytest.mark.asyncio
    async def test_stats(self, mock_db_session):
        """Completion and due counters."""
        mock_db_session.execute = AsyncMock(
            side_effect=[result_with(scalar=n) for n in (20, 12, 5, 2, 3)]
        )

        stats = await get_training_stats(company_id=1, db=mock_db_session)

        assert stats.model_dump() == {
            "total": 20,
            "completed": 12,
            "planned": 5,
            "overdue": 2,
            "due_30_days": 3,
        }
        planned_sql = str(mock_db_session.execute.call_args_list[2].args[0])
        assert "status IN ('Planned', 'In progress')" in planned_sql
