import inspect
from unittest.mock import Mock

import pytest

from solid_principles.domain.payment import CreditCardPayment, Payment, PaymentType, PaypalPayment
from solid_principles.domain.payment import payment as payment_module


def test_credit_card_message(capsys):
    CreditCardPayment().process_payment(100.0)

    assert capsys.readouterr().out == "Processing credit card payment: 100.0\n"


def test_paypal_message(capsys):
    PaypalPayment().process_payment(25.5)

    assert capsys.readouterr().out == "Processing PayPal payment: 25.5\n"


def test_integer_amount_renders_as_float(capsys):
    CreditCardPayment().process_payment(100)

    assert capsys.readouterr().out == "Processing credit card payment: 100.0\n"


@pytest.mark.parametrize("payment_class", [CreditCardPayment, PaypalPayment])
def test_pay_delegates_to_payment_type(payment_class):
    payment_type = Mock(spec=payment_class)

    Payment().pay(payment_type, 42.0)

    payment_type.process_payment.assert_called_once_with(42.0)


def test_new_payment_type_needs_no_orchestrator_change(capsys):
    class BankTransferPayment(PaymentType):
        def process_payment(self, amount: float) -> None:
            print(f"Processing bank transfer payment: {amount}")

    Payment().pay(BankTransferPayment(), 10.0)

    assert capsys.readouterr().out == "Processing bank transfer payment: 10.0\n"


def test_orchestrator_does_not_inspect_payment_type():
    source = inspect.getsource(payment_module.Payment)

    assert "isinstance" not in source
    assert "type(" not in source
    assert "CreditCard" not in source
    assert "Paypal" not in source


def test_negative_amount_is_passed_through(capsys):
    Payment().pay(PaypalPayment(), -5)

    assert capsys.readouterr().out == "Processing PayPal payment: -5.0\n"
