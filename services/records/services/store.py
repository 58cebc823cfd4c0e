"""
Company-Scoped Record Store
===========================

Parameterised SQL access to one record table. Every statement is filtered
by ``company_id`` so a tenant can never read or change another tenant's
rows.

Version: 0.1.0
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from shared.database.postgres import Base
from services.records.models import (
    AuditModel,
    ComplaintModel,
    DocumentModel,
    SupplierModel,
    TrainingRecordModel,
)


# Managed by the store, never taken from request data
_PROTECTED_COLUMNS = frozenset({"id", "company_id", "created_at", "updated_at"})


class RecordStore:
    """
    Persistence helper for a company-scoped table.

    Table and column names come from the ORM model; values are always
    bound parameters.
    """

    def __init__(self, model: type[Base], order_by: str) -> None:
        """
        Args:
            model: ORM model declaring the table
            order_by: SQL ORDER BY clause used when listing
        """
        self.table: str = model.__tablename__
        self.columns: frozenset[str] = frozenset(model.__table__.columns.keys())
        self.writable: frozenset[str] = self.columns - _PROTECTED_COLUMNS
        self.order_by = order_by

    def _check_writable(self, names: set[str] | list[str]) -> None:
        unknown = set(names) - self.writable
        if unknown:
            raise ValueError(f"Cannot write {self.table} columns: {sorted(unknown)}")

    async def list_for_company(
        self,
        db: AsyncSession,
        company_id: int,
        filters: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """
        List a company's rows, optionally filtered by exact column values.

        Filters whose value is ``None`` or empty are ignored.
        """
        clauses = ["company_id = :company_id"]
        params: dict[str, Any] = {"company_id": company_id}

        for column, value in (filters or {}).items():
            if value is None or value == "":
                continue
            if column not in self.columns:
                raise ValueError(f"Unknown {self.table} column: {column}")
            clauses.append(f"{column} = :{column}")
            params[column] = value

        query = text(
            f"SELECT * FROM {self.table} "
            f"WHERE {' AND '.join(clauses)} "
            f"ORDER BY {self.order_by}"
        )
        result = await db.execute(query, params)
        return [dict(row._mapping) for row in result.fetchall()]

    async def get(
        self,
        db: AsyncSession,
        record_id: int,
        company_id: int,
    ) -> dict[str, Any] | None:
        """Fetch one row if it belongs to the company."""
        query = text(
            f"SELECT * FROM {self.table} "
            "WHERE id = :record_id AND company_id = :company_id"
        )
        result = await db.execute(
            query,
            {"record_id": record_id, "company_id": company_id},
        )
        row = result.fetchone()
        return dict(row._mapping) if row else None

    async def create(
        self,
        db: AsyncSession,
        company_id: int,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        """Insert a row for the company and return it."""
        self._check_writable(list(values))

        columns = ["company_id", *values]
        query = text(
            f"INSERT INTO {self.table} ({', '.join(columns)}) "
            f"VALUES ({', '.join(':' + c for c in columns)}) "
            "RETURNING *"
        )
        result = await db.execute(query, {"company_id": company_id, **values})
        row = result.fetchone()
        return dict(row._mapping)  # type: ignore[union-attr]

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        company_id: int,
        values: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Apply a partial update.

        Returns:
            The updated row, or None if no such row exists for the company.
        """
        if not values:
            return await self.get(db, record_id, company_id)

        self._check_writable(list(values))

        assignments = [f"{column} = :{column}" for column in values]
        assignments.append("updated_at = :updated_at")

        query = text(
            f"UPDATE {self.table} "
            f"SET {', '.join(assignments)} "
            "WHERE id = :record_id AND company_id = :company_id "
            "RETURNING *"
        )
        params = {
            **values,
            "record_id": record_id,
            "company_id": company_id,
            "updated_at": datetime.now(UTC),
        }
        result = await db.execute(query, params)
        row = result.fetchone()
        return dict(row._mapping) if row else None

    async def delete(
        self,
        db: AsyncSession,
        record_id: int,
        company_id: int,
    ) -> bool:
        """Delete a row. Returns False if the company has no such row."""
        query = text(
            f"DELETE FROM {self.table} "
            "WHERE id = :record_id AND company_id = :company_id"
        )
        result = await db.execute(
            query,
            {"record_id": record_id, "company_id": company_id},
        )
        return result.rowcount > 0  # type: ignore[union-attr]

    async def count(
        self,
        db: AsyncSession,
        company_id: int,
        where: str = "",
        params: dict[str, Any] | None = None,
    ) -> int:
        """
        Count a company's rows matching an optional SQL condition.

        Args:
            where: Extra condition ANDed with the company filter, using
                bound parameter names from ``params``
        """
        sql = f"SELECT COUNT(*) FROM {self.table} WHERE company_id = :company_id"
        if where:
            sql += f" AND ({where})"

        result = await db.execute(text(sql), {"company_id": company_id, **(params or {})})
        return int(result.scalar() or 0)


complaint_store = RecordStore(ComplaintModel, order_by="created_at DESC, id DESC")
supplier_store = RecordStore(SupplierModel, order_by="name ASC")
document_store = RecordStore(DocumentModel, order_by="department ASC, code ASC, title ASC")
training_store = RecordStore(TrainingRecordModel, order_by="due_date ASC, employee_name ASC")
audit_store = RecordStore(AuditModel, order_by="audit_date DESC, created_at DESC")
