"""Order API views.

Mirrors the dish views: the validation chain and the service call share
one ``repository.atomic()`` block, and errors propagate to the error
responder.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.pipeline import RequestContext
from modules.core.validators import FOUND
from modules.orders import validators
from modules.orders.dtos import OrderDTO
from modules.orders.models import Order
from modules.orders.repositories.memory_repository import order_repository
from modules.orders.services import OrderService


def _render(order: Order) -> dict:
    return order.model_dump(by_alias=True)


class OrderViewSet(GenericViewSet):
    """``/orders`` and ``/orders/{order_id}``."""

    lookup_url_kwarg = validators.ROUTE_PARAM

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repo = order_repository
        self._service = OrderService(repository=self._repo)

    def list(self, request: Request) -> Response:
        """GET /orders"""
        with self._repo.atomic():
            data = [_render(o) for o in self._service.list_orders()]
        return Response({"data": data})

    def create(self, request: Request) -> Response:
        """POST /orders"""
        context = RequestContext.from_request(request)
        with self._repo.atomic():
            validators.create_chain().run(context)
            order = self._service.create_order(
                context.to_dto(OrderDTO, validators.RESOURCE)
            )
        return Response({"data": _render(order)}, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, order_id: str | None = None) -> Response:
        """GET /orders/{order_id}"""
        context = RequestContext.from_request(request, order_id=order_id)
        with self._repo.atomic():
            validators.read_chain(self._repo).run(context)
            data = _render(context.get(FOUND))
        return Response({"data": data})

    def update(self, request: Request, order_id: str | None = None) -> Response:
        """PUT /orders/{order_id}"""
        context = RequestContext.from_request(request, order_id=order_id)
        with self._repo.atomic():
            validators.update_chain(self._repo).run(context)
            order = self._service.update_order(
                context.get(FOUND), context.to_dto(OrderDTO, validators.RESOURCE)
            )
        return Response({"data": _render(order)})

    def destroy(self, request: Request, order_id: str | None = None) -> Response:
        """DELETE /orders/{order_id}"""
        context = RequestContext.from_request(request, order_id=order_id)
        with self._repo.atomic():
            validators.delete_chain(self._repo).run(context)
            self._service.delete_order(context.get(FOUND))
        return Response(status=status.HTTP_204_NO_CONTENT)
