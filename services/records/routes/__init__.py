"""
Records Routes
==============

API route handlers for the compliance records service.
"""

from services.records.routes import audits, auth, complaints, documents, suppliers, training


__all__ = ["audits", "auth", "complaints", "documents", "suppliers", "training"]
