import math
from dataclasses import dataclass
from typing import Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Keeps (page - 1) * limit within a signed 64-bit OFFSET for any limit
MAX_PAGE = (2**63 - 1) // MAX_LIMIT


@dataclass(frozen=True)
class Pagination:
    """Page/limit pair, clamped so that any integer input is usable"""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def clamped(cls, page: Optional[int], limit: Optional[int]) -> "Pagination":
        page = DEFAULT_PAGE if page is None else min(max(page, 1), MAX_PAGE)
        limit = DEFAULT_LIMIT if limit is None else min(max(limit, 1), MAX_LIMIT)
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def summary(self, total: int) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": total,
            "pages": math.ceil(total / self.limit),
        }
