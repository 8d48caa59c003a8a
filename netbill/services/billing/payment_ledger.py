from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Callable, Iterable

from netbill.domains.billing.enums import PaymentStatus
from netbill.domains.billing.models import Customer, NewPayment, PaymentRecord
from netbill.services.billing.billing_cycle import next_billing_date
from netbill.services.billing.date_math import as_date
from netbill.services.billing.money import as_positive_amount
from netbill.shared.errors import MissingCustomer, MissingPayment, ValidationError


def _new_payment_id() -> str:
    return str(uuid.uuid4())


def record_payment(
    customer: Customer,
    payment: NewPayment,
    *,
    new_id: Callable[[], str] = _new_payment_id,
) -> Customer:
    """Rejestruje płatność i przesuwa cykl o dokładnie jeden miesiąc.

    Walidacja idzie przed jakąkolwiek zmianą; wynik to nowy Customer z
    dopisanym rekordem, statusem PAID i nowym billing_date naraz.
    Wejściowy obiekt zostaje nietknięty.
    """
    paid_on = as_date(payment.date, field="payment.date")
    amount = as_positive_amount(payment.amount, field="payment.amount")
    label = (payment.month_label or "").strip()
    if not label:
        raise ValidationError(message="Miesiąc płatności jest wymagany", details={"field": "payment.month_label"})

    record = PaymentRecord(id=new_id(), date=paid_on, amount=amount, month_label=label)

    return replace(
        customer,
        payment_history=(*customer.payment_history, record),
        current_payment_status=PaymentStatus.PAID,
        billing_date=next_billing_date(customer.billing_date),
    )


def delete_payment(customer: Customer, payment_id: str) -> Customer:
    # Uwaga: billing_date i current_payment_status zostają jak były (znane ograniczenie).
    if not any(p.id == payment_id for p in customer.payment_history):
        raise MissingPayment(
            message=f"Płatność {payment_id} nie istnieje",
            details={"customer_id": customer.id, "payment_id": payment_id},
        )
    return replace(
        customer,
        payment_history=tuple(p for p in customer.payment_history if p.id != payment_id),
    )


def find_customer(customers: Iterable[Customer], customer_id: str) -> Customer:
    for c in customers:
        if c.id == customer_id:
            return c
    raise MissingCustomer(message=f"Klient {customer_id} nie istnieje", details={"customer_id": customer_id})


def replace_customer(customers: Iterable[Customer], updated: Customer) -> list[Customer]:
    """Podmiana klienta w kolekcji w jednym kroku; brak klienta -> MissingCustomer, nic nie zmieniamy."""
    current = list(customers)
    find_customer(current, updated.id)
    return [updated if c.id == updated.id else c for c in current]
