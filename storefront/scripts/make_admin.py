"""Grant admin rights to an existing user.

    python -m storefront.scripts.make_admin someone@example.com
"""
import logging
import sys

from sqlmodel import Session, select

from storefront.config import settings
from storefront.database import build_database
from storefront.models.user import User

logger = logging.getLogger(__name__)


def make_admin(session: Session, email: str) -> bool:
    user = session.exec(select(User).where(User.email == email)).first()
    if not user:
        logger.warning(f"User with email '{email}' not found.")
        return False

    user.is_admin = True
    session.add(user)
    session.commit()
    logger.info(f"Successfully updated user '{email}' to admin status.")
    return True


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("usage: python -m storefront.scripts.make_admin <email>", file=sys.stderr)
        return 2

    logging.basicConfig(level=settings.LOG_LEVEL)
    database = build_database(settings)
    try:
        with database.session() as session:
            return 0 if make_admin(session, argv[0]) else 1
    finally:
        database.dispose()


if __name__ == "__main__":
    sys.exit(main())
