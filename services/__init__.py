"""
Majra Services
==============

Services for the Majra food safety compliance platform.

Services:
- records: Complaints, suppliers, documents, training and audit scoring
"""

__all__ = [
    "records",
]
