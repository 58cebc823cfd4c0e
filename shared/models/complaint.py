"""
Complaint Models
================

Customer complaints and their investigation.

Version: 0.1.0
"""

from pydantic import BaseModel, Field

from shared.models.common import IsoDate, RecordInput, RecordOutput


class ComplaintCreate(RecordInput):
    """Request model for logging a complaint. New complaints start open."""

    date_received: IsoDate = None
    customer_name: str = Field(..., min_length=1)
    product_name: str = Field(..., min_length=1)
    complaint_type: str | None = None
    contamination_type: str | None = None
    description: str = Field(..., min_length=1)


class ComplaintStatusUpdate(RecordInput):
    """Request model for moving a complaint through its workflow."""

    status: str = Field(..., min_length=1)


class ComplaintInvestigation(RecordInput):
    """Investigation outcome and customer response letter."""

    root_cause: str | None = None
    corrective_action: str | None = None
    preventive_action: str | None = None
    outcome: str | None = None
    letter_body: str | None = None


class Complaint(RecordOutput):
    """Complaint record as stored for a company."""

    date_received: str | None = None
    customer_name: str | None = None
    product_name: str | None = None
    complaint_type: str | None = None
    contamination_type: str | None = None
    description: str | None = None
    status: str | None = None
    root_cause: str | None = None
    corrective_action: str | None = None
    preventive_action: str | None = None
    outcome: str | None = None
    letter_body: str | None = None


class ComplaintResponse(BaseModel):
    """Single complaint."""

    complaint: Complaint


class ComplaintListResponse(BaseModel):
    """Complaints for a company, newest first."""

    complaints: list[Complaint]


class StatusCount(BaseModel):
    """Number of complaints with one status."""

    status: str | None = None
    count: int


class TypeCount(BaseModel):
    """Number of complaints of one type."""

    type: str
    count: int


class ComplaintStats(BaseModel):
    """Dashboard counters for complaints."""

    status_counts: list[StatusCount]
    top_types: list[TypeCount]
