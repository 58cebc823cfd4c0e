"""
Training Models
===============

Employee training records.

Version: 0.1.0
"""

from pydantic import BaseModel, Field, field_validator

from shared.models.common import IsoDate, RecordInput, RecordOutput


class TrainingCreate(RecordInput):
    """Request model for planning or recording training."""

    employee_name: str = Field(..., min_length=1, max_length=255)
    employee_email: str = ""
    job_title: str = ""
    department: str = ""
    training_topic: str = Field(..., min_length=1, max_length=500)
    training_type: str = ""
    provider: str = ""
    status: str = "Planned"
    due_date: IsoDate = ""
    completion_date: IsoDate = ""
    validity_months: int | None = Field(default=None, ge=0)
    next_review_date: IsoDate = ""
    certificate_location: str = ""
    notes: str = ""

    @field_validator("status")
    @classmethod
    def default_status(cls, v: str) -> str:
        """Training without a status is planned."""
        return v or "Planned"


class TrainingUpdate(RecordInput):
    """Request model for updating a training record. Omitted fields are kept."""

    employee_name: str | None = Field(default=None, min_length=1, max_length=255)
    employee_email: str | None = None
    job_title: str | None = None
    department: str | None = None
    training_topic: str | None = Field(default=None, min_length=1, max_length=500)
    training_type: str | None = None
    provider: str | None = None
    status: str | None = None
    due_date: IsoDate = None
    completion_date: IsoDate = None
    validity_months: int | None = Field(default=None, ge=0)
    next_review_date: IsoDate = None
    certificate_location: str | None = None
    notes: str | None = None


class TrainingRecord(RecordOutput):
    """Training record as stored for a company."""

    employee_name: str
    employee_email: str | None = None
    job_title: str | None = None
    department: str | None = None
    training_topic: str
    training_type: str | None = None
    provider: str | None = None
    status: str | None = None
    due_date: str | None = None
    completion_date: str | None = None
    validity_months: int | None = None
    next_review_date: str | None = None
    certificate_location: str | None = None
    notes: str | None = None


class TrainingResponse(BaseModel):
    """Single training record."""

    training: TrainingRecord


class TrainingListResponse(BaseModel):
    """Training records for a company, by due date."""

    training_records: list[TrainingRecord]


class TrainingStats(BaseModel):
    """Training completion counters."""

    total: int = 0
    completed: int = 0
    planned: int = 0
    overdue: int = 0
    due_30_days: int = 0
