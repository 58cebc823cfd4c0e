"""
Audit Queries
=============

Tenant-scoped audit reads used by scoring and the audit dashboard.

Version: 0.1.0
"""

from datetime import date, timedelta

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from shared.logging import get_logger
from shared.models.audit import AreaStatusCount, AuditStats
from services.records.services.scoring import UNSPECIFIED_AREA, AuditRecord
from services.records.services.store import audit_store

logger = get_logger(__name__)


async def fetch_audits_for_tenant(
    db: AsyncSession,
    company_id: int,
    status_filter: str | None = None,
) -> list[AuditRecord]:
    """
    Load the audits of one company for scoring.

    Args:
        db: Database session
        company_id: Tenant whose audits are loaded
        status_filter: Only audits with exactly this status

    Returns:
        Audit records, never containing another company's rows
    """
    rows = await audit_store.list_for_company(
        db,
        company_id,
        filters={"status": status_filter},
    )
    return [AuditRecord.from_row(row) for row in rows]


async def audit_stats(
    db: AsyncSession,
    company_id: int,
    today: date | None = None,
    due_soon_days: int = 7,
) -> AuditStats:
    """
    Count open, closed and soon-due audits.

    An audit is due soon when it is not closed and its due date falls
    between today and ``due_soon_days`` from now, inclusive.
    """
    today = today or date.today()
    horizon = today + timedelta(days=due_soon_days)

    open_count = await audit_store.count(
        db, company_id, "COALESCE(status, '') <> 'closed'"
    )
    closed_count = await audit_store.count(db, company_id, "status = 'closed'")
    due_soon = await audit_store.count(
        db,
        company_id,
        "COALESCE(status, '') <> 'closed' "
        "AND COALESCE(due_date, '') <> '' "
        "AND due_date >= :today AND due_date <= :horizon",
        {"today": today.isoformat(), "horizon": horizon.isoformat()},
    )

    return AuditStats(
        open=open_count,
        due_soon=due_soon,
        due_soon_days=due_soon_days,
        closed=closed_count,
    )


async def area_status_counts(
    db: AsyncSession,
    company_id: int,
) -> list[AreaStatusCount]:
    """Audit counts grouped by area and status, areas in name order."""
    query = text(
        """
        SELECT
            COALESCE(NULLIF(TRIM(area), ''), :unspecified) AS area,
            status,
            COUNT(*) AS count
        FROM audits
        WHERE company_id = :company_id
        GROUP BY 1, status
        ORDER BY 1, status
        """
    )
    result = await db.execute(
        query,
        {"company_id": company_id, "unspecified": UNSPECIFIED_AREA},
    )
    rows = result.fetchall()

    logger.debug("audit_area_summary_loaded", company_id=company_id, rows=len(rows))

    return [
        AreaStatusCount(area=row.area, status=row.status, count=row.count)
        for row in rows
    ]
