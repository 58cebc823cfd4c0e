"""
Auth Routes
===========

Profile of the signed-in user. Tokens are issued by the account service;
this service only verifies them.

Version: 0.1.0
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from shared.auth import User, get_company_id, get_current_user
from shared.database.postgres import get_postgres_session
from shared.logging import get_logger
from shared.models.user import CurrentUserProfile

logger = get_logger(__name__)

router = APIRouter()


@router.get("/me", response_model=CurrentUserProfile)
async def get_me(
    current_user: User = Depends(get_current_user),
    company_id: int = Depends(get_company_id),
    db: AsyncSession = Depends(get_postgres_session),
) -> CurrentUserProfile:
    """Return the current user together with their company name."""
    try:
        user_id = int(current_user.id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    query = text(
        """
        SELECT u.id, u.company_id, u.name, u.email, u.role,
               c.name AS company_name
        FROM users u
        JOIN companies c ON c.id = u.company_id
        WHERE u.id = :user_id AND u.company_id = :company_id
        """
    )
    result = await db.execute(query, {"user_id": user_id, "company_id": company_id})
    row = result.fetchone()

    if not row:
        logger.warning("current_user_not_found", user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    return CurrentUserProfile.model_validate(dict(row._mapping))
