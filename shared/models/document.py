"""
Document Control Models
=======================

Controlled procedures, policies, work instructions, forms and records,
referenced against a standard clause (SALSA, BRCGS Food, ISO 22000).

Version: 0.1.0
"""

from pydantic import BaseModel, Field, field_validator

from shared.models.common import IsoDate, RecordInput, RecordOutput


class DocumentCreate(RecordInput):
    """Request model for adding a controlled document."""

    code: str = ""
    title: str = Field(..., min_length=1, max_length=500)
    department: str = ""
    process_area: str = ""
    standard: str = ""
    clause: str = ""
    doc_type: str = ""
    version: str = ""
    issue_date: IsoDate = ""
    review_date: IsoDate = ""
    status: str = "Active"
    owner: str = ""
    location: str = ""
    notes: str = ""

    @field_validator("status")
    @classmethod
    def default_status(cls, v: str) -> str:
        """Documents without a status are active."""
        return v or "Active"


class DocumentUpdate(RecordInput):
    """Request model for updating a document. Omitted fields are kept."""

    code: str | None = None
    title: str | None = Field(default=None, min_length=1, max_length=500)
    department: str | None = None
    process_area: str | None = None
    standard: str | None = None
    clause: str | None = None
    doc_type: str | None = None
    version: str | None = None
    issue_date: IsoDate = None
    review_date: IsoDate = None
    status: str | None = None
    owner: str | None = None
    location: str | None = None
    notes: str | None = None


class Document(RecordOutput):
    """Document record as stored for a company."""

    code: str | None = None
    title: str
    department: str | None = None
    process_area: str | None = None
    standard: str | None = None
    clause: str | None = None
    doc_type: str | None = None
    version: str | None = None
    issue_date: str | None = None
    review_date: str | None = None
    status: str | None = None
    owner: str | None = None
    location: str | None = None
    notes: str | None = None


class DocumentResponse(BaseModel):
    """Single document."""

    document: Document


class DocumentListResponse(BaseModel):
    """Documents for a company."""

    documents: list[Document]


class DocumentStats(BaseModel):
    """Document control counters."""

    active: int = 0
    draft: int = 0
    obsolete: int = 0
    overdue_review: int = 0
