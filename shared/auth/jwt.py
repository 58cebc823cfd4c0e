"""
JWT Token Management
====================

Creates and validates the bearer tokens that carry a user's company.

Tokens are issued by the account service; this module shares its secret
so the records service can verify them and derive the tenant.

Version: 0.1.0
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from pydantic import BaseModel, Field

from shared.config import settings
from shared.logging import get_logger


logger = get_logger(__name__)


class TokenData(BaseModel):
    """Decoded JWT token payload."""

    sub: str = Field(..., description="Subject (user ID)")
    company_id: int | None = Field(default=None, description="Tenant the user belongs to")
    role: str | None = Field(default=None, description="User role")
    email: str | None = None
    exp: datetime = Field(..., description="Expiration time")
    iat: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Issued at")
    token_type: str = Field(default="access", description="Token type")


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Payload data (must include 'sub' and 'company_id')
        expires_delta: Custom expiration time (default from settings)

    Returns:
        str: Encoded JWT token
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(minutes=settings.jwt.access_token_expire_minutes)

    to_encode.update(
        {
            "exp": expire,
            "iat": datetime.now(UTC),
            "token_type": "access",
        }
    )

    encoded_jwt = jwt.encode(
        to_encode,
        settings.jwt.secret_key.get_secret_value(),
        algorithm=settings.jwt.algorithm,
    )

    logger.debug(
        "access_token_created",
        sub=data.get("sub"),
        company_id=data.get("company_id"),
        expires_at=expire.isoformat(),
    )

    return encoded_jwt


def _parse_company_id(payload: dict[str, Any]) -> int | None:
    # Older tokens carry the camelCase claim
    raw = payload.get("company_id", payload.get("companyId"))
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning("token_company_id_invalid", company_id=raw)
        return None


def decode_token(token: str, verify_type: str | None = None) -> TokenData | None:
    """
    Decode and validate a JWT token.

    Accepts both ``sub`` and the legacy ``id`` claim for the user ID, and
    treats tokens without a ``token_type`` claim as access tokens.

    Args:
        token: JWT token string
        verify_type: Optional token type to verify (e.g. 'access')

    Returns:
        TokenData: Decoded token data, or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt.secret_key.get_secret_value(),
            algorithms=[settings.jwt.algorithm],
        )
    except JWTError as e:
        logger.warning("token_decode_failed", error=str(e))
        return None

    token_type = payload.get("token_type", "access")
    if verify_type and token_type != verify_type:
        logger.warning(
            "token_type_mismatch",
            expected=verify_type,
            actual=token_type,
        )
        return None

    subject = payload.get("sub", payload.get("id"))
    if subject is None or "exp" not in payload:
        logger.warning("token_claims_missing", has_sub=subject is not None)
        return None

    return TokenData(
        sub=str(subject),
        company_id=_parse_company_id(payload),
        role=payload.get("role"),
        email=payload.get("email"),
        exp=datetime.fromtimestamp(payload["exp"], tz=UTC),
        iat=datetime.fromtimestamp(payload.get("iat", 0), tz=UTC),
        token_type=token_type,
    )
