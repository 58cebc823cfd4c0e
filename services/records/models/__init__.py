"""
Records Database Models
=======================

SQLAlchemy ORM table declarations for the records service.

Tables:
- companies: Tenants
- users: People signed in to a company
- complaints, suppliers, documents, training_records, audits:
  company-scoped compliance records

Version: 0.1.0
"""

from services.records.models.company import CompanyModel, UserModel
from services.records.models.records import (
    AuditModel,
    ComplaintModel,
    DocumentModel,
    SupplierModel,
    TrainingRecordModel,
)

__all__ = [
    "CompanyModel",
    "UserModel",
    "ComplaintModel",
    "SupplierModel",
    "DocumentModel",
    "TrainingRecordModel",
    "AuditModel",
]
