"""
Training Routes
===============

API endpoints for employee training records.

Version: 0.1.0
"""

from datetime import date, timedelta

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.auth import get_company_id
from shared.database.postgres import get_postgres_session
from shared.logging import get_logger
from shared.models.training import (
    TrainingCreate,
    TrainingListResponse,
    TrainingRecord,
    TrainingResponse,
    TrainingStats,
    TrainingUpdate,
)
from services.records.services.store import training_store

logger = get_logger(__name__)

router = APIRouter()

DUE_WARNING_DAYS = 30

# Columns that may not be set to NULL
_REQUIRED_COLUMNS = {"employee_name", "training_topic"}


def _not_found(training_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Training record {training_id} not found",
    )


@router.get("", response_model=TrainingListResponse)
async def list_training(
    status_filter: str | None = Query(default=None, alias="status", description="Filter by status"),
    department: str | None = Query(default=None, description="Filter by department"),
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> TrainingListResponse:
    """List training records by due date, then employee."""
    rows = await training_store.list_for_company(
        db,
        company_id,
        {"status": status_filter, "department": department},
    )

    logger.debug("training_listed", total=len(rows), status=status_filter, department=department)

    return TrainingListResponse(
        training_records=[TrainingRecord.model_validate(row) for row in rows]
    )


@router.get("/stats", response_model=TrainingStats)
async def get_training_stats(
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> TrainingStats:
    """Completion counters and training that is overdue or due within 30 days."""
    today = date.today()
    params = {
        "today": today.isoformat(),
        "horizon": (today + timedelta(days=DUE_WARNING_DAYS)).isoformat(),
    }
    outstanding = "COALESCE(status, '') <> 'Completed' AND COALESCE(due_date, '') <> ''"

    return TrainingStats(
        total=await training_store.count(db, company_id),
        completed=await training_store.count(db, company_id, "status = 'Completed'"),
        planned=await training_store.count(
            db, company_id, "status IN ('Planned', 'In progress')"
        ),
        overdue=await training_store.count(
            db, company_id, f"{outstanding} AND due_date < :today", params
        ),
        due_30_days=await training_store.count(
            db,
            company_id,
            f"{outstanding} AND due_date >= :today AND due_date <= :horizon",
            params,
        ),
    )


@router.get("/{training_id}", response_model=TrainingResponse)
async def get_training(
    training_id: int,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> TrainingResponse:
    """Get one training record."""
    row = await training_store.get(db, training_id, company_id)

    if not row:
        raise _not_found(training_id)

    return TrainingResponse(training=TrainingRecord.model_validate(row))


@router.post("", response_model=TrainingResponse, status_code=status.HTTP_201_CREATED)
async def create_training(
    training: TrainingCreate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> TrainingResponse:
    """Plan or record training for an employee."""
    row = await training_store.create(db, company_id, training.model_dump())

    logger.info(
        "training_created",
        training_id=row["id"],
        topic=row["training_topic"],
        status=row.get("status"),
    )

    return TrainingResponse(training=TrainingRecord.model_validate(row))


@router.patch("/{training_id}", response_model=TrainingResponse)
async def update_training(
    training_id: int,
    update: TrainingUpdate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> TrainingResponse:
    """Update the supplied fields of a training record."""
    values = {
        key: value
        for key, value in update.model_dump(exclude_unset=True).items()
        if value is not None or key not in _REQUIRED_COLUMNS
    }
    row = await training_store.update(db, training_id, company_id, values)

    if not row:
        raise _not_found(training_id)

    logger.info("training_updated", training_id=training_id, fields=sorted(values))

    return TrainingResponse(training=TrainingRecord.model_validate(row))


@router.delete("/{training_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_training(
    training_id: int,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> Response:
    """Delete a training record."""
    if not await training_store.delete(db, training_id, company_id):
        raise _not_found(training_id)

    logger.info("training_deleted", training_id=training_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
