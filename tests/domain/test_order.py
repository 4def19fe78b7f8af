from unittest.mock import Mock

import pytest

from solid_principles.domain.order import (
    OrderCommunication,
    OrderCommunicationPort,
    OrderDBManagement,
    OrderPersistencePort,
    OrderService,
)


@pytest.fixture
def order_db():
    return Mock(spec=OrderPersistencePort)


@pytest.fixture
def order_comm():
    return Mock(spec=OrderCommunicationPort)


@pytest.fixture
def order_service(order_db, order_comm):
    return OrderService(order_db, order_comm)


def test_process_order_touches_no_collaborator(order_service, order_db, order_comm, capsys):
    order_service.process_order(7)

    assert capsys.readouterr().out == "Processing order: 7\n"
    assert order_db.mock_calls == []
    assert order_comm.mock_calls == []


def test_save_only_uses_persistence(order_service, order_db, order_comm):
    order_service.save_order_to_database(7)

    order_db.save_order_to_db.assert_called_once_with(7)
    assert order_comm.mock_calls == []


def test_email_only_uses_communication(order_service, order_db, order_comm):
    order_service.send_order_email(7)

    order_comm.send_order_email.assert_called_once_with(7)
    assert order_db.mock_calls == []


def test_send_order_email_end_to_end(order_db, capsys):
    service = OrderService(order_db, OrderCommunication())

    service.send_order_email(42)

    assert capsys.readouterr().out == "Sending order email for order: 42\n"
    assert order_db.mock_calls == []


def test_save_order_end_to_end(order_comm, capsys):
    service = OrderService(OrderDBManagement(), order_comm)

    service.save_order_to_database(42)

    assert capsys.readouterr().out == "Saving order 42 to database\n"
    assert order_comm.mock_calls == []


def test_service_keeps_injected_collaborators(order_db, order_comm):
    service = OrderService(order_db=order_db, order_comm=order_comm)

    assert service.order_db is order_db
    assert service.order_comm is order_comm
