"""Dish API views.

Every action runs its validation chain and the service call, or the
rendering of what it read, inside ``repository.atomic()``.  A failing
check raises and the error responder renders it, so views never build
error bodies themselves.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.pipeline import RequestContext
from modules.core.validators import FOUND
from modules.dishes import validators
from modules.dishes.dtos import DishDTO
from modules.dishes.repositories.memory_repository import dish_repository
from modules.dishes.services import DishService


class DishViewSet(GenericViewSet):
    """``/dishes`` and ``/dishes/{dish_id}``.  There is no delete."""

    lookup_url_kwarg = validators.ROUTE_PARAM

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repo = dish_repository
        self._service = DishService(repository=self._repo)

    def list(self, request: Request) -> Response:
        """GET /dishes"""
        with self._repo.atomic():
            data = [dish.model_dump() for dish in self._service.list_dishes()]
        return Response({"data": data})

    def create(self, request: Request) -> Response:
        """POST /dishes"""
        context = RequestContext.from_request(request)
        with self._repo.atomic():
            validators.create_chain().run(context)
            dish = self._service.create_dish(
                context.to_dto(DishDTO, validators.RESOURCE)
            )
        return Response({"data": dish.model_dump()}, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, dish_id: str | None = None) -> Response:
        """GET /dishes/{dish_id}"""
        context = RequestContext.from_request(request, dish_id=dish_id)
        with self._repo.atomic():
            validators.read_chain(self._repo).run(context)
            data = context.get(FOUND).model_dump()
        return Response({"data": data})

    def update(self, request: Request, dish_id: str | None = None) -> Response:
        """PUT /dishes/{dish_id}"""
        context = RequestContext.from_request(request, dish_id=dish_id)
        with self._repo.atomic():
            validators.update_chain(self._repo).run(context)
            dish = self._service.update_dish(
                context.get(FOUND), context.to_dto(DishDTO, validators.RESOURCE)
            )
        return Response({"data": dish.model_dump()})
