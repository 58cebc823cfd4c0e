"""
Supplier Models
===============

Approved suppliers and their certification.

Version: 0.1.0
"""

from pydantic import BaseModel, Field

from shared.models.common import IsoDate, RecordInput, RecordOutput


class SupplierCreate(RecordInput):
    """Request model for registering a supplier."""

    name: str = Field(..., min_length=1, max_length=255)
    material: str = ""
    certificate_type: str = ""
    certificate_expiry: IsoDate = ""
    risk_level: str = ""
    status: str = ""
    notes: str = ""


class SupplierUpdate(RecordInput):
    """Request model for updating a supplier. Omitted fields are kept."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    material: str | None = None
    certificate_type: str | None = None
    certificate_expiry: IsoDate = None
    risk_level: str | None = None
    status: str | None = None
    notes: str | None = None


class Supplier(RecordOutput):
    """Supplier record as stored for a company."""

    name: str
    material: str | None = None
    certificate_type: str | None = None
    certificate_expiry: str | None = None
    risk_level: str | None = None
    status: str | None = None
    notes: str | None = None


class SupplierResponse(BaseModel):
    """Single supplier."""

    supplier: Supplier


class SupplierListResponse(BaseModel):
    """Suppliers for a company, by name."""

    suppliers: list[Supplier]


class SupplierStats(BaseModel):
    """Certificate coverage counters for suppliers."""

    total: int = 0
    missing_cert: int = 0
    expiring_30_days: int = 0
    expired: int = 0
