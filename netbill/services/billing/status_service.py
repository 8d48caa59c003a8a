from __future__ import annotations

from datetime import date

from netbill.domains.billing.enums import DISPLAY_STATUS_LABELS, DisplayStatus, PaymentStatus
from netbill.domains.billing.models import Customer
from netbill.services.billing.date_math import as_date, days_between
from netbill.shared.errors import ValidationError

DUE_SOON_DAYS = 3


def derive_status(
    billing_date: date,
    current_payment_status: PaymentStatus,
    today: date,
    *,
    due_soon_days: int = DUE_SOON_DAYS,
) -> DisplayStatus:
    """Status do wyświetlenia, liczony od zera przy każdym wywołaniu.

    Kolejność reguł:
      1. termin dziś albo w ciągu `due_soon_days` dni -> DUE_SOON (wygrywa nawet z PAID)
      2. zapisany PAID -> PAID
      3. zapisany OVERDUE -> OVERDUE (ręczna flaga jest honorowana)
      4. PENDING: termin w przeszłości -> OVERDUE, w przeciwnym razie PENDING
    """
    billing = as_date(billing_date, field="billing_date")
    ref = as_date(today, field="today")
    try:
        stored = PaymentStatus(current_payment_status)
    except ValueError as e:
        raise ValidationError(
            message=f"Nieznany status płatności: {current_payment_status!r}",
            details={"current_payment_status": str(current_payment_status)},
        ) from e

    days_until_billing = days_between(ref, billing)

    if 0 <= days_until_billing <= due_soon_days:
        return DisplayStatus.DUE_SOON

    if stored is PaymentStatus.PAID:
        return DisplayStatus.PAID

    if stored is PaymentStatus.OVERDUE:
        return DisplayStatus.OVERDUE

    if days_until_billing < 0:
        return DisplayStatus.OVERDUE
    return DisplayStatus.PENDING


def derive_customer_status(customer: Customer, today: date, *, due_soon_days: int = DUE_SOON_DAYS) -> DisplayStatus:
    return derive_status(
        customer.billing_date,
        customer.current_payment_status,
        today,
        due_soon_days=due_soon_days,
    )


def display_label(status: DisplayStatus) -> str:
    return DISPLAY_STATUS_LABELS[status]
