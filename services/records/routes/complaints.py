"""
Complaints Routes
=================

API endpoints for customer complaints and their investigation.

Version: 0.1.0
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from shared.auth import get_company_id
from shared.database.postgres import get_postgres_session
from shared.logging import get_logger
from shared.models.complaint import (
    Complaint,
    ComplaintCreate,
    ComplaintInvestigation,
    ComplaintListResponse,
    ComplaintResponse,
    ComplaintStats,
    ComplaintStatusUpdate,
    StatusCount,
    TypeCount,
)
from services.records.services.store import complaint_store

logger = get_logger(__name__)

router = APIRouter()

TOP_TYPES_LIMIT = 5


def _not_found(complaint_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Complaint {complaint_id} not found",
    )


@router.get("", response_model=ComplaintListResponse)
async def list_complaints(
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> ComplaintListResponse:
    """List the company's complaints, newest first."""
    rows = await complaint_store.list_for_company(db, company_id)

    logger.debug("complaints_listed", total=len(rows))

    return ComplaintListResponse(complaints=[Complaint.model_validate(row) for row in rows])


@router.get("/stats", response_model=ComplaintStats)
async def get_complaint_stats(
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> ComplaintStats:
    """Complaint counts per status and the most frequent complaint types."""
    params = {"company_id": company_id, "limit": TOP_TYPES_LIMIT}

    status_result = await db.execute(
        text(
            """
            SELECT status, COUNT(*) AS count
            FROM complaints
            WHERE company_id = :company_id
            GROUP BY status
            ORDER BY status
            """
        ),
        params,
    )
    type_result = await db.execute(
        text(
            """
            SELECT complaint_type AS type, COUNT(*) AS count
            FROM complaints
            WHERE company_id = :company_id
              AND COALESCE(TRIM(complaint_type), '') <> ''
            GROUP BY complaint_type
            ORDER BY count DESC, complaint_type
            LIMIT :limit
            """
        ),
        params,
    )

    return ComplaintStats(
        status_counts=[
            StatusCount(status=row.status, count=row.count)
            for row in status_result.fetchall()
        ],
        top_types=[
            TypeCount(type=row.type, count=row.count)
            for row in type_result.fetchall()
        ],
    )


@router.get("/{complaint_id}", response_model=ComplaintResponse)
async def get_complaint(
    complaint_id: int,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> ComplaintResponse:
    """Get one complaint."""
    row = await complaint_store.get(db, complaint_id, company_id)

    if not row:
        raise _not_found(complaint_id)

    return ComplaintResponse(complaint=Complaint.model_validate(row))


@router.post("", response_model=ComplaintResponse, status_code=status.HTTP_201_CREATED)
async def create_complaint(
    complaint: ComplaintCreate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> ComplaintResponse:
    """Log a new complaint. It starts in the open state."""
    values = complaint.model_dump()
    values["status"] = "open"

    row = await complaint_store.create(db, company_id, values)

    logger.info(
        "complaint_created",
        complaint_id=row["id"],
        complaint_type=row.get("complaint_type"),
    )

    return ComplaintResponse(complaint=Complaint.model_validate(row))


@router.api_route("/{complaint_id}/status", methods=["PATCH", "PUT"], response_model=ComplaintResponse)
async def update_complaint_status(
    complaint_id: int,
    update: ComplaintStatusUpdate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> ComplaintResponse:
    """Move a complaint to a new workflow status."""
    row = await complaint_store.update(db, complaint_id, company_id, {"status": update.status})

    if not row:
        raise _not_found(complaint_id)

    logger.info("complaint_status_changed", complaint_id=complaint_id, status=update.status)

    return ComplaintResponse(complaint=Complaint.model_validate(row))


@router.api_route(
    "/{complaint_id}/investigation",
    methods=["PATCH", "PUT"],
    response_model=ComplaintResponse,
)
async def update_complaint_investigation(
    complaint_id: int,
    investigation: ComplaintInvestigation,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> ComplaintResponse:
    """Record root cause, actions, outcome and the customer letter."""
    values = investigation.model_dump(exclude_unset=True)
    row = await complaint_store.update(db, complaint_id, company_id, values)

    if not row:
        raise _not_found(complaint_id)

    logger.info("complaint_investigation_saved", complaint_id=complaint_id, fields=sorted(values))

    return ComplaintResponse(complaint=Complaint.model_validate(row))


@router.delete("/{complaint_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_complaint(
    complaint_id: int,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> Response:
    """Delete a complaint."""
    if not await complaint_store.delete(db, complaint_id, company_id):
        raise _not_found(complaint_id)

    logger.info("complaint_deleted", complaint_id=complaint_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
