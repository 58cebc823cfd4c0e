"""
Audit Routes Tests
==================

Tests for audit API endpoints and tenant-scoped audit queries.

Version: 0.1.0
"""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import HTTPException

from shared.config import ScoringMethod
from shared.models.audit import AuditCreate, AuditUpdate
from services.records.routes.audits import (
    create_audit,
    delete_audit,
    get_area_summary,
    get_audit,
    get_audit_stats,
    get_overall_score,
    list_audits,
    update_audit,
)
from services.records.services.audits import audit_stats, fetch_audits_for_tenant
from tests.conftest import make_row, result_with


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def audit_rows():
    """Audit rows for company 1."""
    return [
        make_row(
            id=1,
            company_id=1,
            title="Packing hall GMP",
            area="Packing",
            severity="major",
            status="open",
            due_date="2020-01-01",
        ),
        make_row(
            id=2,
            company_id=1,
            title="Goods-in check",
            area="Packing",
            severity="minor",
            status="closed",
            due_date="",
        ),
        make_row(
            id=3,
            company_id=1,
            title="Allergen walk",
            area="",
            severity="critical",
            status="closed",
            corrective_action="Retrained line staff",
        ),
    ]


def executed_sql(session: AsyncMock, call: int = 0) -> tuple[str, dict]:
    args = session.execute.call_args_list[call].args
    return str(args[0]), args[1]


# =============================================================================
# Tenant Query Tests
# =============================================================================


class TestFetchAuditsForTenant:
    """Tests for loading one company's audits."""

    @pytest.mark.asyncio
    async def test_query_is_scoped_to_company(self, mock_db_session, audit_rows):
        """Only the caller's company is queried."""
        mock_db_session.execute = AsyncMock(return_value=result_with(audit_rows))

        audits = await fetch_audits_for_tenant(mock_db_session, company_id=1)

        sql, params = executed_sql(mock_db_session)
        assert "company_id = :company_id" in sql
        assert params == {"company_id": 1}
        assert [a.id for a in audits] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_status_filter(self, mock_db_session):
        """A status filter is passed as a bound parameter."""
        mock_db_session.execute = AsyncMock(return_value=result_with([]))

        audits = await fetch_audits_for_tenant(mock_db_session, 4, status_filter="open")

        sql, params = executed_sql(mock_db_session)
        assert "status = :status" in sql
        assert params == {"company_id": 4, "status": "open"}
        assert audits == []


# =============================================================================
# Score Endpoint Tests
# =============================================================================


class TestOverallScore:
    """Tests for the overall score endpoint."""

    @pytest.mark.asyncio
    async def test_no_audits(self, mock_db_session):
        """A company without audits has no score."""
        mock_db_session.execute = AsyncMock(return_value=result_with([]))

        result = await get_overall_score(method=None, company_id=1, db=mock_db_session)

        assert result.overall_score is None
        assert result.by_area == []

    @pytest.mark.asyncio
    async def test_additive_by_area(self, mock_db_session, audit_rows):
        """Scores 65, 90 and 65 give Packing 78 and Unspecified 65."""
        mock_db_session.execute = AsyncMock(return_value=result_with(audit_rows))

        result = await get_overall_score(
            method=ScoringMethod.ADDITIVE, company_id=1, db=mock_db_session
        )

        assert result.method == ScoringMethod.ADDITIVE
        assert result.overall_score == 73
        assert [(a.area, a.total_audits, a.avg_score) for a in result.by_area] == [
            ("Packing", 2, 78),
            ("Unspecified", 1, 65),
        ]

    @pytest.mark.asyncio
    async def test_method_override(self, mock_db_session, audit_rows):
        """The multiplicative method can be requested per call."""
        mock_db_session.execute = AsyncMock(return_value=result_with(audit_rows))

        result = await get_overall_score(
            method=ScoringMethod.MULTIPLICATIVE, company_id=1, db=mock_db_session
        )

        # 15, 80 and 20
        assert result.method == ScoringMethod.MULTIPLICATIVE
        assert result.overall_score == 38
        assert result.by_area[0].avg_score == 48

    @pytest.mark.asyncio
    async def test_default_method_from_settings(self, mock_db_session, audit_rows):
        """Without an override the configured method is used."""
        mock_db_session.execute = AsyncMock(return_value=result_with(audit_rows))

        with patch("services.records.routes.audits.settings") as mock_settings:
            mock_settings.scoring.method = ScoringMethod.MULTIPLICATIVE
            result = await get_overall_score(method=None, company_id=1, db=mock_db_session)

        assert result.method == ScoringMethod.MULTIPLICATIVE


# =============================================================================
# Stats and Summary Tests
# =============================================================================


class TestAuditStats:
    """Tests for audit dashboard counters."""

    @pytest.mark.asyncio
    async def test_counts(self, mock_db_session):
        """Open, closed and due-soon counts come from three queries."""
        mock_db_session.execute = AsyncMock(
            side_effect=[
                result_with(scalar=5),
                result_with(scalar=3),
                result_with(scalar=2),
            ]
        )

        stats = await audit_stats(mock_db_session, 1, today=date(2024, 6, 1), due_soon_days=7)

        assert stats.open == 5
        assert stats.closed == 3
        assert stats.due_soon == 2
        assert stats.due_soon_days == 7

        sql, params = executed_sql(mock_db_session, 2)
        assert "due_date >= :today AND due_date <= :horizon" in sql
        assert params["today"] == "2024-06-01"
        assert params["horizon"] == "2024-06-08"

    @pytest.mark.asyncio
    async def test_stats_route(self, mock_db_session):
        """The route returns zero counts for an empty company."""
        mock_db_session.execute = AsyncMock(return_value=result_with(scalar=None))

        stats = await get_audit_stats(company_id=1, db=mock_db_session)

        assert (stats.open, stats.due_soon, stats.closed) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_area_summary(self, mock_db_session):
        """Area and status counts are passed through in query order."""
        rows = [
            make_row(area="Packing", status="closed", count=2),
            make_row(area="Unspecified", status="open", count=1),
        ]
        mock_db_session.execute = AsyncMock(return_value=result_with(rows))

        summary = await get_area_summary(company_id=1, db=mock_db_session)

        assert [(r.area, r.status, r.count) for r in summary.rows] == [
            ("Packing", "closed", 2),
            ("Unspecified", "open", 1),
        ]
        _, params = executed_sql(mock_db_session)
        assert params == {"company_id": 1, "unspecified": "Unspecified"}


# =============================================================================
# CRUD Route Tests
# =============================================================================


class TestAuditRoutes:
    """Tests for audit CRUD endpoints."""

    @pytest.mark.asyncio
    async def test_list_audits(self, mock_db_session, audit_rows):
        """Audits are listed inside an ``audits`` envelope."""
        mock_db_session.execute = AsyncMock(return_value=result_with(audit_rows))

        result = await list_audits(status_filter=None, company_id=1, db=mock_db_session)

        assert [a.title for a in result.audits] == [
            "Packing hall GMP",
            "Goods-in check",
            "Allergen walk",
        ]

    @pytest.mark.asyncio
    async def test_get_audit_not_found(self, mock_db_session):
        """Audits of another company are reported as not found."""
        mock_db_session.execute = AsyncMock(return_value=result_with([]))

        with pytest.raises(HTTPException) as exc_info:
            await get_audit(audit_id=99, method=None, company_id=2, db=mock_db_session)

        assert exc_info.value.status_code == 404
        _, params = executed_sql(mock_db_session)
        assert params == {"record_id": 99, "company_id": 2}

    @pytest.mark.asyncio
    async def test_get_audit_with_score(self, mock_db_session, audit_rows):
        """A single audit is returned with its compliance score."""
        mock_db_session.execute = AsyncMock(return_value=result_with(audit_rows[:1]))

        result = await get_audit(
            audit_id=1, method=ScoringMethod.ADDITIVE, company_id=1, db=mock_db_session
        )

        assert result.audit.id == 1
        assert result.compliance_score == 65

    @pytest.mark.asyncio
    async def test_create_audit(self, mock_db_session, sample_audit_data):
        """Creating an audit stores the company and defaults status to open."""
        audit = AuditCreate.model_validate(sample_audit_data)
        created = make_row(id=10, company_id=1, **audit.model_dump())
        mock_db_session.execute = AsyncMock(return_value=result_with([created]))

        result = await create_audit(audit=audit, company_id=1, db=mock_db_session)

        sql, params = executed_sql(mock_db_session)
        assert sql.startswith("INSERT INTO audits")
        assert params["company_id"] == 1
        assert params["status"] == "open"
        assert params["audit_date"] == "2024-03-01"
        assert result.audit.id == 10
        assert result.compliance_score is not None

    @pytest.mark.asyncio
    async def test_update_ignores_null_title(self, mock_db_session, audit_rows):
        """A null title is not written over the stored one."""
        update = AuditUpdate.model_validate({"title": None, "status": "closed"})
        mock_db_session.execute = AsyncMock(return_value=result_with(audit_rows[1:2]))

        await update_audit(audit_id=2, update=update, company_id=1, db=mock_db_session)

        sql, params = executed_sql(mock_db_session)
        assert "title" not in params
        assert params["status"] == "closed"
        assert "updated_at = :updated_at" in sql

    @pytest.mark.asyncio
    async def test_update_not_found(self, mock_db_session):
        """Updating a missing audit is a 404."""
        mock_db_session.execute = AsyncMock(return_value=result_with([]))

        with pytest.raises(HTTPException) as exc_info:
            await update_audit(
                audit_id=5,
                update=AuditUpdate(status="closed"),
                company_id=1,
                db=mock_db_session,
            )

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_audit(self, mock_db_session, audit_rows):
        """Deleting returns 204, a missing audit is a 404."""
        mock_db_session.execute = AsyncMock(return_value=result_with(audit_rows[:1]))
        response = await delete_audit(audit_id=1, company_id=1, db=mock_db_session)
        assert response.status_code == 204

        mock_db_session.execute = AsyncMock(return_value=result_with([]))
        with pytest.raises(HTTPException) as exc_info:
            await delete_audit(audit_id=1, company_id=1, db=mock_db_session)
        assert exc_info.value.status_code == 404
