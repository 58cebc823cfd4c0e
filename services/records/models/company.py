"""
Company and User Database Models
================================

Tenants and the people who sign in to them.

Version: 0.1.0
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)

from shared.database.postgres import Base


class CompanyModel(Base):
    """
    SQLAlchemy model for companies.

    The tenant boundary: every record row references exactly one company.
    """

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    address = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<Company {self.id}: {self.name}>"


class UserModel(Base):
    """SQLAlchemy model for users. Accounts are managed by the issuing service."""

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_company", "company_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    name = Column(Text, nullable=False)
    email = Column(String(320), nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    role = Column(String(50), nullable=False, default="admin", server_default="admin")
    is_active = Column(Integer, default=1, server_default="1")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<User {self.id}: {self.email} (company {self.company_id})>"
