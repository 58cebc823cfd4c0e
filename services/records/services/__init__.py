"""
Records Services
================

Business logic for the compliance records service.

Services:
- RecordStore: Company-scoped persistence for each record table
- ComplianceScorer: Audit compliance scoring and area aggregation
- Audit queries: Tenant audit loading and dashboard counters

Version: 0.1.0
"""

from services.records.services.audits import (
    area_status_counts,
    audit_stats,
    fetch_audits_for_tenant,
)
from services.records.services.scoring import (
    AreaAggregate,
    AuditRecord,
    ComplianceScorer,
    ScoreSummary,
    ScoreWeights,
    clamp_score,
    normalize_area,
    round_half_up,
)
from services.records.services.store import (
    RecordStore,
    audit_store,
    complaint_store,
    document_store,
    supplier_store,
    training_store,
)


__all__ = [
    # Store
    "RecordStore",
    "audit_store",
    "complaint_store",
    "document_store",
    "supplier_store",
    "training_store",
    # Scoring
    "ComplianceScorer",
    "ScoreWeights",
    "AuditRecord",
    "AreaAggregate",
    "ScoreSummary",
    "clamp_score",
    "normalize_area",
    "round_half_up",
    # Audits
    "fetch_audits_for_tenant",
    "audit_stats",
    "area_status_counts",
]
