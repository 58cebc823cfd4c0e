"""
Records Service
===============

Company-scoped food safety compliance records.

Features:
- Customer complaints and investigations
- Approved suppliers and certificate expiry
- Document control and review dates
- Employee training records
- Audits with compliance scoring per area

Port: 3000
"""

__version__ = "0.1.0"
