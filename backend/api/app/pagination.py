# app/pagination.py
import re
from typing import Optional, Tuple

from app.models import INT64_MAX, INT64_MIN, PaginationResponse

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: Optional[str]) -> int:
    """
    Lenient query-string integer parsing: a missing value or anything that is
    not a plain (optionally signed) decimal literal becomes 0, and so does a
    literal outside the signed 64-bit range.
    """
    if value is None or not _INT_RE.fullmatch(value):
        return 0
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return 0
    return number


def normalize(page: int, limit: int, default_limit: int = 10) -> Tuple[int, int]:
    if page < 1:
        page = 1
    if limit < 1:
        limit = default_limit
    return page, limit


def offset(page: int, limit: int) -> int:
    # clamped so a huge page lands past the last row instead of overflowing
    return min((page - 1) * limit, INT64_MAX)


def page_count(total: int, limit: int) -> int:
    count = total // limit
    if total % limit > 0:
        count += 1
    return count


def build_pagination(page: int, limit: int, total: int) -> PaginationResponse:
    return PaginationResponse(
        page=page,
        page_size=limit,
        page_count=page_count(total, limit),
        total=total,
    )
