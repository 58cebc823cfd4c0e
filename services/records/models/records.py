"""
Compliance Record Database Models
=================================

SQLAlchemy ORM models for the company-scoped record tables.

Calendar dates are kept as ISO ``YYYY-MM-DD`` text so that window checks
can compare strings.

Version: 0.1.0
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    func,
)

from shared.database.postgres import Base


def _company_fk() -> Column:
    return Column(Integer, ForeignKey("companies.id"), nullable=False)


def _created_at() -> Column:
    return Column(DateTime(timezone=True), server_default=func.now())


class ComplaintModel(Base):
    """Customer complaints and their investigation."""

    __tablename__ = "complaints"
    __table_args__ = (Index("ix_complaints_company", "company_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = _company_fk()

    date_received = Column(Text)
    customer_name = Column(Text)
    product_name = Column(Text)
    complaint_type = Column(Text)
    contamination_type = Column(Text)
    description = Column(Text)

    status = Column(Text, server_default="open")

    root_cause = Column(Text)
    corrective_action = Column(Text)
    preventive_action = Column(Text)
    outcome = Column(Text)

    letter_body = Column(Text)

    created_at = _created_at()
    updated_at = Column(DateTime(timezone=True))


class SupplierModel(Base):
    """Approved suppliers and their certificates."""

    __tablename__ = "suppliers"
    __table_args__ = (Index("ix_suppliers_company", "company_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = _company_fk()

    name = Column(Text, nullable=False)
    material = Column(Text)
    certificate_type = Column(Text)
    certificate_expiry = Column(Text)
    risk_level = Column(Text)
    status = Column(Text)
    notes = Column(Text)

    created_at = _created_at()
    updated_at = Column(DateTime(timezone=True))


class DocumentModel(Base):
    """Controlled documents (policies, procedures, work instructions, forms)."""

    __tablename__ = "documents"
    __table_args__ = (Index("ix_documents_company", "company_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = _company_fk()

    code = Column(Text)  # e.g. DOC-001
    title = Column(Text, nullable=False)
    department = Column(Text)
    process_area = Column(Text)

    standard = Column(Text)  # SALSA, BRCGS Food, ISO 22000
    clause = Column(Text)

    doc_type = Column(Text)  # Policy, Procedure, WI, Form, Record
    version = Column(Text)
    issue_date = Column(Text)
    review_date = Column(Text)

    status = Column(Text)  # Draft, Active, Obsolete
    owner = Column(Text)
    location = Column(Text)
    notes = Column(Text)

    created_at = _created_at()
    updated_at = Column(DateTime(timezone=True))


class TrainingRecordModel(Base):
    """Employee training records."""

    __tablename__ = "training_records"
    __table_args__ = (Index("ix_training_records_company", "company_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = _company_fk()

    employee_name = Column(Text, nullable=False)
    employee_email = Column(Text)
    job_title = Column(Text)
    department = Column(Text)
    training_topic = Column(Text, nullable=False)
    training_type = Column(Text)
    provider = Column(Text)
    status = Column(Text)
    due_date = Column(Text)
    completion_date = Column(Text)
    validity_months = Column(Integer)
    next_review_date = Column(Text)
    certificate_location = Column(Text)
    notes = Column(Text)

    created_at = _created_at()
    updated_at = Column(DateTime(timezone=True))


class AuditModel(Base):
    """Audits and GMP inspections with their findings and actions."""

    __tablename__ = "audits"
    __table_args__ = (
        Index("ix_audits_company", "company_id"),
        Index("ix_audits_company_status", "company_id", "status"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = _company_fk()

    title = Column(Text, nullable=False)
    area = Column(Text)
    standard = Column(Text)
    section = Column(Text)
    auditor = Column(Text)
    audit_date = Column(Text)
    status = Column(Text, server_default="open")
    severity = Column(Text)
    due_date = Column(Text)
    responsible_person = Column(Text)
    findings = Column(Text)
    root_cause = Column(Text)
    corrective_action = Column(Text)
    preventive_action = Column(Text)
    evidence_notes = Column(Text)

    created_at = _created_at()
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
