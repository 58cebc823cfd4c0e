"""
Shared Models
=============

Pydantic request/response models for the compliance records API.

Models:
- Audit models (Audit, AuditCreate, AuditUpdate, AuditScoreSummary)
- Complaint models (Complaint, ComplaintCreate, ComplaintInvestigation)
- Supplier models (Supplier, SupplierCreate, SupplierUpdate)
- Document control models (Document, DocumentCreate, DocumentUpdate)
- Training models (TrainingRecord, TrainingCreate, TrainingUpdate)
"""

from shared.models.audit import (
    AreaScore,
    AreaStatusCount,
    AreaStatusSummary,
    Audit,
    AuditCreate,
    AuditListResponse,
    AuditResponse,
    AuditScoreSummary,
    AuditStats,
    AuditUpdate,
)
from shared.models.complaint import (
    Complaint,
    ComplaintCreate,
    ComplaintInvestigation,
    ComplaintListResponse,
    ComplaintResponse,
    ComplaintStats,
    ComplaintStatusUpdate,
)
from shared.models.supplier import (
    Supplier,
    SupplierCreate,
    SupplierListResponse,
    SupplierResponse,
    SupplierStats,
    SupplierUpdate,
)
from shared.models.document import (
    Document,
    DocumentCreate,
    DocumentListResponse,
    DocumentResponse,
    DocumentStats,
    DocumentUpdate,
)
from shared.models.training import (
    TrainingCreate,
    TrainingListResponse,
    TrainingRecord,
    TrainingResponse,
    TrainingStats,
    TrainingUpdate,
)
from shared.models.user import CurrentUserProfile
from shared.models.common import (
    ErrorResponse,
    HealthResponse,
    SuccessResponse,
)

__all__ = [
    # Audit
    "Audit",
    "AuditCreate",
    "AuditUpdate",
    "AuditResponse",
    "AuditListResponse",
    "AuditStats",
    "AuditScoreSummary",
    "AreaScore",
    "AreaStatusCount",
    "AreaStatusSummary",
    # Complaint
    "Complaint",
    "ComplaintCreate",
    "ComplaintStatusUpdate",
    "ComplaintInvestigation",
    "ComplaintResponse",
    "ComplaintListResponse",
    "ComplaintStats",
    # Supplier
    "Supplier",
    "SupplierCreate",
    "SupplierUpdate",
    "SupplierResponse",
    "SupplierListResponse",
    "SupplierStats",
    # Document
    "Document",
    "DocumentCreate",
    "DocumentUpdate",
    "DocumentResponse",
    "DocumentListResponse",
    "DocumentStats",
    # Training
    "TrainingRecord",
    "TrainingCreate",
    "TrainingUpdate",
    "TrainingResponse",
    "TrainingListResponse",
    "TrainingStats",
    # User
    "CurrentUserProfile",
    # Common
    "SuccessResponse",
    "ErrorResponse",
    "HealthResponse",
]
