import logging

from fastapi import Depends
from storefront.exceptions import Forbidden
from storefront.dependencies.auth import get_current_user
from storefront.utils.token import AuthenticatedUser

logger = logging.getLogger(__name__)


def require_admin(current_user: AuthenticatedUser = Depends(get_current_user)):
    if not current_user.is_admin:
        logger.warning(f"Admin access denied for {current_user.email}")
        raise Forbidden("Forbidden: Requires admin privileges.")
    return current_user
