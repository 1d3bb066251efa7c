"""Unit tests for OrderService.

Covers:
- create_order: id assignment, unchecked status, dish lines echoed.
- update_order: only deliverTo / mobileNumber / status change, on a copy.
- delete_order: pending only.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.orders.dtos import OrderDTO
from modules.orders.exceptions import OrderNotFound, OrderNotPending
from modules.orders.models import Order
from modules.orders.services import OrderService

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.next_id.return_value = "11"
    repo.save.side_effect = lambda o: o
    repo.delete.return_value = True
    return repo


@pytest.fixture()
def service(mock_repo):
    return OrderService(repository=mock_repo)


def _dto(**overrides) -> OrderDTO:
    fields = {
        "deliverTo": "Main St",
        "mobileNumber": "555",
        "status": "pending",
        "dishes": [{"id": "1", "quantity": 2}],
    }
    fields.update(overrides)
    return OrderDTO.model_validate(fields)


def _order(status="pending") -> Order:
    return Order(
        id="4",
        deliverTo="Old St",
        mobileNumber="111",
        status=status,
        dishes=[{"id": "9", "quantity": 1}],
    )


class TestCreateOrder:
    def test_assigns_id_and_echoes_fields(self, service, mock_repo):
        order = service.create_order(_dto())

        assert order.model_dump(by_alias=True) == {
            "id": "11",
            "deliverTo": "Main St",
            "mobileNumber": "555",
            "status": "pending",
            "dishes": [{"id": "1", "quantity": 2}],
        }
        mock_repo.save.assert_called_once_with(order)

    def test_status_is_stored_unchecked(self, service):
        assert service.create_order(_dto(status="whatever")).status == "whatever"

    @pytest.mark.parametrize("status", [5, ["pending"], {"k": 1}])
    def test_non_string_status_is_kept_as_sent(self, service, status):
        assert service.create_order(_dto(status=status)).status == status

    def test_dish_lines_are_copied_as_plain_dicts(self, service):
        dto = _dto(dishes=[{"id": "1", "name": "Soup", "quantity": 2}])
        order = service.create_order(dto)

        assert order.dishes == [{"id": "1", "name": "Soup", "quantity": 2}]
        assert order.dishes[0] is not dto.dishes[0]

    def test_missing_status_is_none(self, service):
        fields = _dto().model_dump(by_alias=True, exclude={"status"})
        order = service.create_order(OrderDTO.model_validate(fields))
        assert order.status is None


class TestUpdateOrder:
    def test_overwrites_contact_and_status(self, service, mock_repo):
        existing = _order()

        updated = service.update_order(
            existing,
            _dto(deliverTo="New St", mobileNumber="999", status="preparing"),
        )

        assert updated.id == "4"
        assert updated.deliver_to == "New St"
        assert updated.mobile_number == "999"
        assert updated.status == "preparing"
        mock_repo.save.assert_called_once_with(updated)

    def test_stored_instance_is_not_mutated(self, service):
        existing = _order()

        updated = service.update_order(
            existing,
            _dto(deliverTo="New St", mobileNumber="999", status="preparing"),
        )

        assert updated is not existing
        assert existing.model_dump(by_alias=True) == _order().model_dump(by_alias=True)

    def test_dishes_are_not_reassigned(self, service):
        updated = service.update_order(
            _order(), _dto(dishes=[{"id": "2", "quantity": 5}])
        )
        assert updated.dishes == [{"id": "9", "quantity": 1}]


class TestDeleteOrder:
    def test_pending_order_is_removed(self, service, mock_repo):
        service.delete_order(_order())
        mock_repo.delete.assert_called_once_with("4")

    @pytest.mark.parametrize("status", ["preparing", "out-for-delivery", "delivered"])
    def test_non_pending_order_is_refused(self, service, mock_repo, status):
        with pytest.raises(
            OrderNotPending, match="An order cannot be deleted unless it is pending."
        ) as exc:
            service.delete_order(_order(status=status))
        assert exc.value.status_code == 400
        mock_repo.delete.assert_not_called()

    def test_vanished_order(self, service, mock_repo):
        mock_repo.delete.return_value = False
        with pytest.raises(OrderNotFound):
            service.delete_order(_order())

    def test_unhashable_status_is_refused(self, service, mock_repo):
        with pytest.raises(OrderNotPending):
            service.delete_order(_order(status={"k": "pending"}))
        mock_repo.delete.assert_not_called()


class TestListOrders:
    def test_delegates_to_repository(self, service, mock_repo):
        mock_repo.list.return_value = []
        assert service.list_orders() == []
        mock_repo.list.assert_called_once_with()
