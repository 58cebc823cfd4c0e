"""
Audit Compliance Scoring
========================

Turns audit records into 0-100 compliance scores and aggregates them per
plant area.

Two scoring methods are supported:
- additive: start at 100, subtract severity and overdue penalties, add a
  closure bonus for documented remediation (default)
- multiplicative: severity factor times status factor times 100

Unrecognised severity or status text never changes a score; it falls into
the most lenient bucket and a warning is logged.

Version: 0.1.0
"""

import math
from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

from shared.config.settings import ScoringMethod
from shared.logging import get_logger

logger = get_logger(__name__)

UNSPECIFIED_AREA = "Unspecified"
SCORE_MIN = 0
SCORE_MAX = 100


class Severity(str, Enum):
    """Finding severity buckets."""

    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"
    OBSERVATION = "observation"
    NONE = "none"


class AuditState(str, Enum):
    """Audit workflow states."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    CLOSED = "closed"


_SEVERITY_ALIASES: dict[str, Severity] = {
    "critical": Severity.CRITICAL,
    "cat 1": Severity.CRITICAL,
    "cat1": Severity.CRITICAL,
    "major": Severity.MAJOR,
    "cat 2": Severity.MAJOR,
    "cat2": Severity.MAJOR,
    "minor": Severity.MINOR,
    "cat 3": Severity.MINOR,
    "cat3": Severity.MINOR,
    "observation": Severity.OBSERVATION,
    "obs": Severity.OBSERVATION,
}

_STATUS_ALIASES: dict[str, AuditState] = {
    "open": AuditState.OPEN,
    "in_progress": AuditState.IN_PROGRESS,
    "closed": AuditState.CLOSED,
}


@dataclass(frozen=True)
class ScoreWeights:
    """Penalties, bonuses and factors used by both scoring methods."""

    severity_penalties: dict[Severity, int] = field(
        default_factory=lambda: {
            Severity.CRITICAL: 40,
            Severity.MAJOR: 25,
            Severity.MINOR: 10,
            Severity.OBSERVATION: 5,
            Severity.NONE: 0,
        }
    )
    overdue_penalty: int = 10
    closure_bonus: int = 5

    severity_factors: dict[Severity, float] = field(
        default_factory=lambda: {
            Severity.CRITICAL: 0.2,
            Severity.MAJOR: 0.5,
            Severity.MINOR: 0.8,
            Severity.OBSERVATION: 1.0,
            Severity.NONE: 1.0,
        }
    )
    status_factors: dict[AuditState, float] = field(
        default_factory=lambda: {
            AuditState.CLOSED: 1.0,
            AuditState.IN_PROGRESS: 0.6,
            AuditState.OPEN: 0.3,
        }
    )


@dataclass(frozen=True)
class AuditRecord:
    """The fields of an audit row that scoring looks at."""

    id: int | None = None
    area: str | None = None
    severity: str | None = None
    status: str | None = None
    due_date: str | None = None
    findings: str | None = None
    root_cause: str | None = None
    corrective_action: str | None = None
    preventive_action: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AuditRecord":
        due = row.get("due_date")
        if isinstance(due, date):
            due = due.isoformat()
        return cls(
            id=row.get("id"),
            area=row.get("area"),
            severity=row.get("severity"),
            status=row.get("status"),
            due_date=due,
            findings=row.get("findings"),
            root_cause=row.get("root_cause"),
            corrective_action=row.get("corrective_action"),
            preventive_action=row.get("preventive_action"),
        )


@dataclass(frozen=True)
class AreaAggregate:
    area: str
    total_audits: int
    avg_score: int


@dataclass(frozen=True)
class ScoreSummary:
    """Overall mean score plus one entry per area, sorted by area name."""

    overall: int | None
    by_area: list[AreaAggregate]
    method: ScoringMethod


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> float:
    return max(SCORE_MIN, min(SCORE_MAX, value))


def normalize_area(area: str | None) -> str:
    return (area or "").strip() or UNSPECIFIED_AREA


def _has_text(value: str | None) -> bool:
    return bool(value and value.strip())


class ComplianceScorer:
    """
    Scores audits for one tenant.

    The caller is responsible for passing audits of a single company only.
    """

    def __init__(
        self,
        method: ScoringMethod = ScoringMethod.ADDITIVE,
        weights: ScoreWeights | None = None,
    ) -> None:
        self.method = ScoringMethod(method)
        self.weights = weights or ScoreWeights()

    # =========================================================================
    # Normalisation
    # =========================================================================

    def _severity(self, audit: AuditRecord) -> Severity:
        raw = (audit.severity or "").strip().lower()
        if not raw:
            return Severity.NONE

        severity = _SEVERITY_ALIASES.get(raw)
        if severity is None:
            logger.warning(
                "audit_severity_unrecognized",
                audit_id=audit.id,
                severity=audit.severity,
            )
            return Severity.NONE
        return severity

    def _status(self, audit: AuditRecord) -> AuditState:
        raw = (audit.status or "").strip().lower()
        if not raw:
            return AuditState.OPEN

        key = raw.replace("-", "_").replace(" ", "_")
        status = _STATUS_ALIASES.get(key)
        if status is None:
            logger.warning(
                "audit_status_unrecognized",
                audit_id=audit.id,
                status=audit.status,
            )
            return AuditState.OPEN
        return status

    # =========================================================================
    # Scoring
    # =========================================================================

    def _multiplicative(self, audit: AuditRecord) -> float:
        severity_factor = self.weights.severity_factors[self._severity(audit)]
        status_factor = self.weights.status_factors[self._status(audit)]
        return severity_factor * status_factor * 100

    def _additive(self, audit: AuditRecord, today: date) -> float:
        severity = self._severity(audit)
        status = self._status(audit)
        closed = status is AuditState.CLOSED

        score = 100 - self.weights.severity_penalties[severity]

        # ISO dates compare correctly as strings
        if audit.due_date and not closed and audit.due_date < today.isoformat():
            score -= self.weights.overdue_penalty

        if closed and any(
            _has_text(text)
            for text in (audit.corrective_action, audit.preventive_action, audit.findings)
        ):
            score += self.weights.closure_bonus

        return score

    def score_audit(self, audit: AuditRecord, today: date | None = None) -> int:
        """
        Score one audit.

        Args:
            audit: Audit to score
            today: Reference date for the overdue check (defaults to today)

        Returns:
            Integer score in [0, 100]
        """
        if self.method is ScoringMethod.MULTIPLICATIVE:
            raw = self._multiplicative(audit)
        else:
            raw = self._additive(audit, today or date.today())

        return round_half_up(clamp_score(raw))

    def aggregate_by_area(
        self,
        audits: Iterable[AuditRecord],
        today: date | None = None,
    ) -> ScoreSummary:
        """
        Score every audit and average per area and overall.

        Returns:
            ScoreSummary with ``overall=None`` and no areas when there are
            no audits
        """
        today = today or date.today()

        scores: list[int] = []
        by_area: dict[str, list[int]] = defaultdict(list)

        for audit in audits:
            score = self.score_audit(audit, today)
            scores.append(score)
            by_area[normalize_area(audit.area)].append(score)

        if not scores:
            return ScoreSummary(overall=None, by_area=[], method=self.method)

        areas = [
            AreaAggregate(
                area=area,
                total_audits=len(area_scores),
                avg_score=round_half_up(sum(area_scores) / len(area_scores)),
            )
            for area, area_scores in sorted(by_area.items())
        ]

        logger.debug(
            "audits_scored",
            method=self.method.value,
            audits=len(scores),
            areas=len(areas),
        )

        return ScoreSummary(
            overall=round_half_up(sum(scores) / len(scores)),
            by_area=areas,
            method=self.method,
        )
