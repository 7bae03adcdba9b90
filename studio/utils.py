"""Utility functions."""
import math
import uuid

from sqlalchemy.orm import Query

# Offsets past this overflow the database driver
MAX_PAGE = 10_000


def generate_id() -> str:
    """Generate a UUID4 string for entity IDs."""
    return str(uuid.uuid4())


def paginate(qry: Query, page: int, limit: int) -> tuple[list, dict]:
    """Apply page/limit to a query. Returns (items, pagination meta)."""
    total = qry.order_by(None).count()
    items = qry.offset((page - 1) * limit).limit(limit).all()
    return items, {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": math.ceil(total / limit) if limit else 0,
    }
