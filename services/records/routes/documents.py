"""
Documents Routes
================

API endpoints for document control.

Version: 0.1.0
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.auth import get_company_id
from shared.database.postgres import get_postgres_session
from shared.logging import get_logger
from shared.models.document import (
    Document,
    DocumentCreate,
    DocumentListResponse,
    DocumentResponse,
    DocumentStats,
    DocumentUpdate,
)
from services.records.services.store import document_store

logger = get_logger(__name__)

router = APIRouter()


def _not_found(document_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Document {document_id} not found",
    )


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    status_filter: str | None = Query(default=None, alias="status", description="Filter by status"),
    standard: str | None = Query(default=None, description="Filter by standard"),
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> DocumentListResponse:
    """List controlled documents by department, code and title."""
    rows = await document_store.list_for_company(
        db,
        company_id,
        {"status": status_filter, "standard": standard},
    )

    logger.debug("documents_listed", total=len(rows), status=status_filter, standard=standard)

    return DocumentListResponse(documents=[Document.model_validate(row) for row in rows])


@router.get("/stats", response_model=DocumentStats)
async def get_document_stats(
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> DocumentStats:
    """Document counts per status and active documents past their review date."""
    return DocumentStats(
        active=await document_store.count(db, company_id, "status = 'Active'"),
        draft=await document_store.count(db, company_id, "status = 'Draft'"),
        obsolete=await document_store.count(db, company_id, "status = 'Obsolete'"),
        overdue_review=await document_store.count(
            db,
            company_id,
            "status = 'Active' AND COALESCE(review_date, '') <> '' AND review_date < :today",
            {"today": date.today().isoformat()},
        ),
    )


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: int,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> DocumentResponse:
    """Get one document."""
    row = await document_store.get(db, document_id, company_id)

    if not row:
        raise _not_found(document_id)

    return DocumentResponse(document=Document.model_validate(row))


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    document: DocumentCreate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> DocumentResponse:
    """Add a controlled document."""
    row = await document_store.create(db, company_id, document.model_dump())

    logger.info("document_created", document_id=row["id"], code=row.get("code"))

    return DocumentResponse(document=Document.model_validate(row))


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: int,
    update: DocumentUpdate,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> DocumentResponse:
    """Update the supplied fields of a document."""
    values = update.model_dump(exclude_unset=True)
    if values.get("title", "") is None:
        del values["title"]

    row = await document_store.update(db, document_id, company_id, values)

    if not row:
        raise _not_found(document_id)

    logger.info("document_updated", document_id=document_id, fields=sorted(values))

    return DocumentResponse(document=Document.model_validate(row))


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: int,
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> Response:
    """Delete a document."""
    if not await document_store.delete(db, document_id, company_id):
        raise _not_found(document_id)

    logger.info("document_deleted", document_id=document_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
