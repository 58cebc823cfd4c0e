"""
FastAPI Authentication Dependencies
===================================

Dependency injection for route protection and tenant resolution.

Version: 0.1.0
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel, Field

from shared.auth.jwt import decode_token
from shared.logging import bind_context, get_logger


logger = get_logger(__name__)

# Extracts the bearer token from the Authorization header
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/auth/login",
    auto_error=False,
)


class User(BaseModel):
    """Authenticated user model for dependency injection."""

    id: str = Field(..., description="User ID")
    company_id: int | None = Field(default=None, description="Tenant the user belongs to")
    email: str | None = Field(default=None, description="User email")
    role: str | None = Field(default=None, description="User role")


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> User:
    """
    Extract and validate user from JWT token.

    Args:
        token: JWT token from Authorization header

    Returns:
        User: Authenticated user

    Raises:
        HTTPException: 401 if token is missing or invalid
    """
    if token is None:
        logger.warning("auth_token_missing")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token_data = decode_token(token, verify_type="access")

    if token_data is None:
        logger.warning("auth_token_invalid")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    bind_context(user_id=token_data.sub, company_id=token_data.company_id)
    logger.debug("user_authenticated", user_id=token_data.sub)

    return User(
        id=token_data.sub,
        company_id=token_data.company_id,
        email=token_data.email,
        role=token_data.role,
    )


async def get_company_id(
    current_user: Annotated[User, Depends(get_current_user)],
) -> int:
    """
    Resolve the tenant of the authenticated user.

    Every record query is filtered by the value returned here.

    Raises:
        HTTPException: 500 if the token carries no company
    """
    if current_user.company_id is None:
        logger.error("user_without_company", user_id=current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Current user has no company assigned",
        )
    return current_user.company_id

