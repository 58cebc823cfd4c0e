"""
Authentication Module
=====================

JWT bearer-token authentication and tenant resolution.

Features:
- JWT token generation and validation
- FastAPI dependencies for route protection
- Company (tenant) resolution from the token

Usage:
    from shared.auth import get_company_id

    @router.get("/audits")
    async def list_audits(company_id: int = Depends(get_company_id)):
        ...
"""

from shared.auth.jwt import (
    create_access_token,
    decode_token,
    TokenData,
)
from shared.auth.dependencies import (
    User,
    get_company_id,
    get_current_user,
    oauth2_scheme,
)

__all__ = [
    # JWT
    "create_access_token",
    "decode_token",
    "TokenData",
    # Dependencies
    "User",
    "get_current_user",
    "get_company_id",
    "oauth2_scheme",
]
