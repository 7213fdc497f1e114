# -------- USER ACCOUNT --------
import logging

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from storefront.database import get_session
from storefront.dependencies.auth import get_current_user
from storefront.exceptions import Conflict, NotFound, ValidationError
from storefront.models.user import User
from storefront.schemas.user_schemas import AccountUpdateRequest
from storefront.services.email_service import is_valid_email
from storefront.utils.token import AuthenticatedUser

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def get_account(current_user: AuthenticatedUser = Depends(get_current_user)):
    return {
        "message": f"This is your protected account data, {current_user.name}!",
        "user": {
            "id": current_user.user_id,
            "name": current_user.name,
            "email": current_user.email,
        },
    }


@router.put("")
def update_account(
    payload: AccountUpdateRequest,
    session: Session = Depends(get_session),
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    name = (payload.name or "").strip()
    email = (payload.email or "").strip()

    if not name or not email:
        raise ValidationError("Name and email are required.")

    if not is_valid_email(email):
        raise ValidationError("A valid email address is required.")

    user = session.get(User, current_user.user_id)
    if not user:
        raise NotFound("User not found.")

    existing = session.exec(
        select(User).where(User.email == email, User.id != user.id)
    ).first()
    if existing:
        raise Conflict("Email is already in use.")

    user.name = name
    user.email = email
    session.add(user)
    session.commit()
    session.refresh(user)

    logger.info(f"Updated profile for user {user.id}")

    return {
        "message": "Profile updated successfully!",
        "user": {"id": user.id, "name": user.name, "email": user.email},
    }
