from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Header, HTTPException, status
from jose import JWTError, jwt

from .db_mongo import settings

ADMIN_ROLE = "admin"


def create_access_token(subject: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": subject, "role": role, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Dict[str, Any]:
    """Verified claims of ``token``. Raises JWTError when it is invalid or expired."""
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def authorize_admin(authorization: Optional[str]) -> Dict[str, Any]:
    """Claims of an admin bearer token, or a 401."""
    token = bearer_token(authorization)
    if token is None:
        raise _unauthorized("Unauthorized")
    try:
        claims = decode_token(token)
    except JWTError:
        raise _unauthorized("Unauthorized")
    if claims.get("sub") is None:
        raise _unauthorized("Unauthorized")
    if claims.get("role") != ADMIN_ROLE:
        raise _unauthorized("Insufficient permissions")
    return claims


async def require_admin(authorization: Optional[str] = Header(default=None)) -> Dict[str, Any]:
    return authorize_admin(authorization)
