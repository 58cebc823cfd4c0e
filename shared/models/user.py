"""
User Models
===========

Version: 0.1.0
"""

from pydantic import BaseModel


class CurrentUserProfile(BaseModel):
    """The authenticated user together with their company."""

    id: int
    company_id: int
    name: str
    email: str
    role: str
    company_name: str
