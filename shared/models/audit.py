"""
Audit Models
============

Models for audits and GMP inspections and their compliance scores.

Version: 0.1.0
"""

from pydantic import BaseModel, Field, field_validator

from shared.config.settings import ScoringMethod
from shared.models.common import IsoDate, RecordInput, RecordOutput


class AuditCreate(RecordInput):
    """Request model for recording an audit."""

    title: str = Field(..., min_length=1, max_length=500)
    area: str = ""
    standard: str = ""
    section: str = ""
    auditor: str = ""
    audit_date: IsoDate = ""
    status: str = "open"
    severity: str = ""
    due_date: IsoDate = ""
    responsible_person: str = ""
    findings: str = ""
    root_cause: str = ""
    corrective_action: str = ""
    preventive_action: str = ""
    evidence_notes: str = ""

    @field_validator("status")
    @classmethod
    def default_status(cls, v: str) -> str:
        """New audits without a status start open."""
        return v or "open"


class AuditUpdate(RecordInput):
    """Request model for updating an audit. Omitted fields are kept."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    area: str | None = None
    standard: str | None = None
    section: str | None = None
    auditor: str | None = None
    audit_date: IsoDate = None
    status: str | None = None
    severity: str | None = None
    due_date: IsoDate = None
    responsible_person: str | None = None
    findings: str | None = None
    root_cause: str | None = None
    corrective_action: str | None = None
    preventive_action: str | None = None
    evidence_notes: str | None = None


class Audit(RecordOutput):
    """Audit record as stored for a company."""

    title: str
    area: str | None = None
    standard: str | None = None
    section: str | None = None
    auditor: str | None = None
    audit_date: str | None = None
    status: str | None = None
    severity: str | None = None
    due_date: str | None = None
    responsible_person: str | None = None
    findings: str | None = None
    root_cause: str | None = None
    corrective_action: str | None = None
    preventive_action: str | None = None
    evidence_notes: str | None = None


class AuditResponse(BaseModel):
    """Single audit with its current compliance score."""

    audit: Audit
    compliance_score: int | None = None


class AuditListResponse(BaseModel):
    """Audits for a company."""

    audits: list[Audit]


class AuditStats(BaseModel):
    """Dashboard counters for audits."""

    open: int = 0
    due_soon: int = 0
    due_soon_days: int = 7
    closed: int = 0


class AreaScore(BaseModel):
    """Average compliance score for one area / department."""

    area: str
    total_audits: int
    avg_score: int


class AuditScoreSummary(BaseModel):
    """
    Overall and per-area compliance scores.

    ``overall_score`` is ``None`` when the company has no audits, which is
    distinct from a real score of zero.
    """

    overall_score: int | None = None
    by_area: list[AreaScore] = Field(default_factory=list)
    method: ScoringMethod = ScoringMethod.ADDITIVE


class AreaStatusCount(BaseModel):
    """Number of audits in one area with one status."""

    area: str
    status: str | None = None
    count: int


class AreaStatusSummary(BaseModel):
    """Audit counts grouped by area and status, for charts."""

    rows: list[AreaStatusCount]
