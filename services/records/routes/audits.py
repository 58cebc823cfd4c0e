"""
Audits Routes
=============

API endpoints for audits, GMP inspections and their compliance scores.

Version: 0.1.0
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.auth import get_company_id
from shared.config import ScoringMethod, settings
from shared.database.postgres import get_postgres_session
from shared.logging import get_logger
from shared.models.audit import (
    AreaScore,
    AreaStatusSummary,
    Audit,
    AuditCreate,
    AuditListResponse,
    AuditResponse,
    AuditScoreSummary,
    AuditStats,
    AuditUpdate,
)
from services.records.services.audits import (
    area_status_counts,
    audit_stats,
    fetch_audits_for_tenant,
)
from services.records.services.scoring import AuditRecord, ComplianceScorer
from services.records.services.store import audit_store

logger = get_logger(__name__)

router = APIRouter()

# Columns that may not be set to NULL
_REQUIRED_COLUMNS = {"title"}


def _scorer(method: ScoringMethod | None) -> ComplianceScorer:
    return ComplianceScorer(method=method or settings.scoring.method)


def _audit_response(row: dict, scorer: ComplianceScorer) -> AuditResponse:
    return AuditResponse(
        audit=Audit.model_validate(row),
        compliance_score=scorer.score_audit(AuditRecord.from_row(row), date.today()),
    )


@router.get("", response_model=AuditListResponse)
async def list_audits(
    status_filter: str | None = Query(default=None, alias="status", description="Filter by status"),
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> AuditListResponse:
    """List the company's audits, most recent audit date first."""
    rows = await audit_store.list_for_company(db, company_id, {"status": status_filter})

    logger.debug("audits_listed", total=len(rows), status=status_filter)

    return AuditListResponse(audits=[Audit.model_validate(row) for row in rows])


@router.get("/stats", response_model=AuditStats)
async def get_audit_stats(
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> AuditStats:
    """Open, closed and soon-due audit counts."""
    return await audit_stats(
        db,
        company_id,
        today=date.today(),
        due_soon_days=settings.scoring.due_soon_days,
    )


@router.get("/score/overall", response_model=AuditScoreSummary)
async def get_overall_score(
    method: ScoringMethod | None = Query(default=None, description="Scoring method override"),
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> AuditScoreSummary:
    """
    Overall compliance score and per-area averages.

    ``overall_score`` is null when the company has no audits.
    """
    audits = await fetch_audits_for_tenant(db, company_id)
    summary = _scorer(method).aggregate_by_area(audits, today=date.today())

    logger.info(
        "audit_score_calculated",
        method=summary.method.value,
        overall_score=summary.overall,
        audits=len(audits),
    )

    return AuditScoreSummary(
        overall_score=summary.overall,
        by_area=[
            AreaScore(
                area=area.area,
                total_audits=area.total_audits,
                avg_score=area.avg_score,
            )
            for area in summary.by_area
        ],
        method=summary.method,
    )


@router.get("/summary/by-area", response_model=AreaStatusSummary)
async def get_area_summary(
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> AreaStatusSummary:
    """Audit counts by area and status."""
    return AreaStatusSummary(rows=await area_status_counts(db, company_id))


@router.get("/{audit_id}", response_model=AuditResponse)
async def get_audit(
    audit_id: int,
    method: ScoringMethod | None = Query(default=None, description="Scoring method override"),
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> AuditResponse:
    """Get one audit together with its compliance score."""
    row = await audit_store.get(db, audit_id, company_id)

    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Audit {audit_id} not found",
        )

    return _audit_response(row, _scorer(method))


@router.post("", response_model=AuditResponse, status_code=status.HTTP_201_CREATED)
async def create_audit(
    audit: AuditCreate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> AuditResponse:
    """Record a new audit. Audits without a status start open."""
    row = await audit_store.create(db, company_id, audit.model_dump())

    logger.info(
        "audit_created",
        audit_id=row["id"],
        area=row.get("area"),
        severity=row.get("severity"),
    )

    return _audit_response(row, _scorer(None))


@router.patch("/{audit_id}", response_model=AuditResponse)
async def update_audit(
    audit_id: int,
    update: AuditUpdate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> AuditResponse:
    """Update the supplied fields of an audit."""
    values = {
        key: value
        for key, value in update.model_dump(exclude_unset=True).items()
        if value is not None or key not in _REQUIRED_COLUMNS
    }
    row = await audit_store.update(db, audit_id, company_id, values)

    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Audit {audit_id} not found",
        )

    logger.info("audit_updated", audit_id=audit_id, fields=sorted(values))

    return _audit_response(row, _scorer(None))


@router.delete("/{audit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_audit(
    audit_id: int,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> Response:
    """Delete an audit."""
    deleted = await audit_store.delete(db, audit_id, company_id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Audit {audit_id} not found",
        )

    logger.info("audit_deleted", audit_id=audit_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
