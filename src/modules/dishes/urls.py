"""Dish URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.dishes.views import DishViewSet

router = SimpleRouter(trailing_slash=False)
router.register("dishes", DishViewSet, basename="dish")

urlpatterns = router.urls
