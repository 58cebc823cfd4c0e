"""
Suppliers Routes
================

API endpoints for approved suppliers and certificate tracking.

Version: 0.1.0
"""

from datetime import date, timedelta

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.auth import get_company_id
from shared.database.postgres import get_postgres_session
from shared.logging import get_logger
from shared.models.supplier import (
    Supplier,
    SupplierCreate,
    SupplierListResponse,
    SupplierResponse,
    SupplierStats,
    SupplierUpdate,
)
from services.records.services.store import supplier_store

logger = get_logger(__name__)

router = APIRouter()

EXPIRY_WARNING_DAYS = 30


@router.get("", response_model=SupplierListResponse)
async def list_suppliers(
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> SupplierListResponse:
    """List the company's suppliers by name."""
    rows = await supplier_store.list_for_company(db, company_id)
    return SupplierListResponse(suppliers=[Supplier.model_validate(row) for row in rows])


@router.get("/stats", response_model=SupplierStats)
async def get_supplier_stats(
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> SupplierStats:
    """
    Certificate coverage counters.

    A certificate expiring today counts as expired, not as expiring.
    """
    today = date.today()
    params = {
        "today": today.isoformat(),
        "horizon": (today + timedelta(days=EXPIRY_WARNING_DAYS)).isoformat(),
    }
    has_expiry = "COALESCE(certificate_expiry, '') <> ''"

    return SupplierStats(
        total=await supplier_store.count(db, company_id),
        missing_cert=await supplier_store.count(
            db, company_id, "COALESCE(TRIM(certificate_type), '') = ''"
        ),
        expiring_30_days=await supplier_store.count(
            db,
            company_id,
            f"{has_expiry} AND certificate_expiry > :today AND certificate_expiry <= :horizon",
            params,
        ),
        expired=await supplier_store.count(
            db,
            company_id,
            f"{has_expiry} AND certificate_expiry <= :today",
            params,
        ),
    )


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(
    supplier_id: int,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> SupplierResponse:
    """Get one supplier."""
    row = await supplier_store.get(db, supplier_id, company_id)

    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Supplier {supplier_id} not found",
        )

    return SupplierResponse(supplier=Supplier.model_validate(row))


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
async def create_supplier(
    supplier: SupplierCreate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> SupplierResponse:
    """Register a supplier."""
    row = await supplier_store.create(db, company_id, supplier.model_dump())

    logger.info("supplier_created", supplier_id=row["id"], name=row["name"])

    return SupplierResponse(supplier=Supplier.model_validate(row))


@router.patch("/{supplier_id}", response_model=SupplierResponse)
async def update_supplier(
    supplier_id: int,
    update: SupplierUpdate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> SupplierResponse:
    """Update the supplied fields of a supplier."""
    values = update.model_dump(exclude_unset=True)
    if values.get("name", "") is None:
        del values["name"]

    row = await supplier_store.update(db, supplier_id, company_id, values)

    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Supplier {supplier_id} not found",
        )

    logger.info("supplier_updated", supplier_id=supplier_id, fields=sorted(values))

    return SupplierResponse(supplier=Supplier.model_validate(row))


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(
    supplier_id: int,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> Response:
    """Delete a supplier."""
    if not await supplier_store.delete(db, supplier_id, company_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Supplier {supplier_id} not found",
        )

    logger.info("supplier_deleted", supplier_id=supplier_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
