import logging
from dataclasses import dataclass
from jose import jwt, ExpiredSignatureError, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional
from storefront.config import settings
from storefront.exceptions import Unauthenticated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity carried by a verified bearer token."""

    user_id: int
    email: str
    name: str
    is_admin: bool = False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()

    expire = datetime.now(timezone.utc) + (
        expires_delta
        if expires_delta
        else timedelta(minutes=settings.access_token_expire_minutes)
    )

    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.algorithm
    )
    return encoded_jwt


def create_user_token(user, expires_delta: Optional[timedelta] = None):
    return create_access_token(
        {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "is_admin": bool(user.is_admin),
        },
        expires_delta,
    )


def decode_access_token(token: str) -> AuthenticatedUser:
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
    except ExpiredSignatureError:
        logger.info("Rejected expired token")
        raise Unauthenticated("Token has expired. Please log in again.")
    except JWTError as e:
        logger.info(f"Rejected invalid token: {e}")
        raise Unauthenticated("Invalid token.")

    user_id = payload.get("user_id") or payload.get("sub")

    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid token payload.")

    return AuthenticatedUser(
        user_id=user_id,
        email=payload.get("email") or "",
        name=payload.get("name") or "",
        is_admin=bool(payload.get("is_admin")),
    )
