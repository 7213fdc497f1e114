import math

from sqlalchemy import func
from sqlmodel import select

DEFAULT_LIMIT = 15


def paginate(
    *,
    session,
    query,
    page: int = 1,
    limit: int = DEFAULT_LIMIT,
):
    if page < 1:
        page = 1

    if limit < 1:
        limit = DEFAULT_LIMIT

    offset = (page - 1) * limit

    # Same filters as the page query, without its ordering
    total = session.exec(
        select(func.count()).select_from(query.order_by(None).subquery())
    ).one()

    results = session.exec(
        query.offset(offset).limit(limit)
    ).all()

    return {
        "total_items": total,
        "total_pages": math.ceil(total / limit),
        "current_page": page,
        "limit": limit,
        "results": results,
    }
