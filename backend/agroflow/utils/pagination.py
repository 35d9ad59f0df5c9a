import math
from typing import Any, Dict, List


def last_page(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def paginated(data: List[Any], total: int, page: int, limit: int) -> Dict[str, Any]:
    return {
        "data": data,
        "total": total,
        "page": page,
        "lastPage": last_page(total, limit),
    }


def offset_for(page: int, limit: int) -> int:
    return (page - 1) * limit
