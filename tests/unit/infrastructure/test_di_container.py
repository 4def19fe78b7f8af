"""Tests for the dependency injection container and service wiring."""

from unittest.mock import Mock

import pytest

from solid_principles.config.schemas import AppConfig, NotificationConfig, PaymentConfig
from solid_principles.domain.base.exceptions import UnsupportedTypeError
from solid_principles.domain.notification import CommunicationService, EmailService, NotificationManager, SMSService
from solid_principles.domain.order import OrderCommunication, OrderDBManagement, OrderService
from solid_principles.domain.payment import CreditCardPayment, Payment, PaymentType, PaypalPayment
from solid_principles.infrastructure.di import (
    DIContainer,
    FactoryError,
    UnregisteredDependencyError,
    register_all_services,
)


class Dependency:
    pass


class Consumer:
    def __init__(self, dependency: Dependency):
        self.dependency = dependency


class TestDIContainer:
    """Test container registration and lookup."""

    def setup_method(self):
        self.container = DIContainer()

    def test_register_instance(self):
        instance = Dependency()
        self.container.register_instance(Dependency, instance)

        assert self.container.get(Dependency) is instance
        assert self.container.has(Dependency)

    def test_singleton_without_factory(self):
        self.container.register_singleton(Dependency)

        first = self.container.get(Dependency)

        assert isinstance(first, Dependency)
        assert self.container.get(Dependency) is first

    def test_singleton_factory_called_once(self):
        factory = Mock(side_effect=lambda c: Dependency())
        self.container.register_singleton(Dependency, factory)

        self.container.get(Dependency)
        self.container.get(Dependency)

        factory.assert_called_once_with(self.container)

    def test_factory_creates_new_instances(self):
        self.container.register_factory(Dependency, lambda c: Dependency())

        assert self.container.get(Dependency) is not self.container.get(Dependency)

    def test_factory_resolves_nested_dependencies(self):
        self.container.register_singleton(Dependency)
        self.container.register_factory(Consumer, lambda c: Consumer(c.get(Dependency, Consumer)))

        consumer = self.container.get(Consumer)

        assert consumer.dependency is self.container.get(Dependency)

    def test_unregistered_type(self):
        assert not self.container.has(Dependency)
        with pytest.raises(UnregisteredDependencyError):
            self.container.get(Dependency)

    def test_missing_nested_dependency_reports_parent(self):
        self.container.register_factory(Consumer, lambda c: Consumer(c.get(Dependency, Consumer)))

        with pytest.raises(UnregisteredDependencyError) as exc_info:
            self.container.get(Consumer)

        assert exc_info.value.parent_type is Consumer
        assert "Consumer" in str(exc_info.value)

    def test_failing_factory_is_wrapped(self):
        def broken(container):
            raise RuntimeError("boom")

        self.container.register_factory(Dependency, broken)

        with pytest.raises(FactoryError) as exc_info:
            self.container.get(Dependency)

        assert isinstance(exc_info.value.cause, RuntimeError)

    def test_clear(self):
        self.container.register_singleton(Dependency)
        self.container.clear()

        assert not self.container.has(Dependency)


class TestServiceRegistration:
    """Test the composition of the examples."""

    def test_notification_manager_gets_configured_channel(self, container):
        manager = container.get(NotificationManager)

        assert isinstance(manager.communication_service, EmailService)
        assert container.get(NotificationManager) is manager

    def test_sms_channel_from_config(self):
        config = AppConfig(notification=NotificationConfig(channel="sms"))
        container = register_all_services(DIContainer(), config)

        assert isinstance(container.get(CommunicationService), SMSService)

    def test_unknown_channel(self):
        config = AppConfig(notification=NotificationConfig(channel="pigeon"))
        container = register_all_services(DIContainer(), config)

        with pytest.raises(UnsupportedTypeError):
            container.get(NotificationManager)

    def test_order_service_collaborators(self, container):
        service = container.get(OrderService)

        assert isinstance(service.order_db, OrderDBManagement)
        assert isinstance(service.order_comm, OrderCommunication)

    def test_payment_wiring(self, container):
        assert isinstance(container.get(Payment), Payment)
        assert isinstance(container.get(PaymentType), CreditCardPayment)

    def test_payment_type_from_config(self):
        config = AppConfig(payment=PaymentConfig(default_type="paypal"))
        container = register_all_services(DIContainer(), config)

        assert isinstance(container.get(PaymentType), PaypalPayment)

    def test_default_container_and_config(self):
        container = register_all_services()

        assert container.get(AppConfig) == AppConfig()
