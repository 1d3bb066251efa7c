from typing import Any, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.dishes.repositories.memory_repository import dish_repository
from modules.orders.repositories.memory_repository import order_repository

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    stores: Dict[str, Dict[str, Any]] = {
        "dishes": {"status": "up", "count": dish_repository.count()},
        "orders": {"status": "up", "count": order_repository.count()},
    }
    logger.debug("health_check_completed", **{k: v["count"] for k, v in stores.items()})
    return JsonResponse(
        {
            "status": "healthy",
            "timestamp": timezone.now().isoformat(),
            "stores": stores,
        }
    )
