from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from netbill.domains.billing.enums import ClientTimeType, PaymentStatus, ServiceType


@dataclass(frozen=True)
class PaymentRecord:
    id: str
    date: date
    amount: Decimal
    month_label: str


@dataclass(frozen=True)
class NewPayment:
    """Dane płatności z formularza (jeszcze bez id)."""

    date: date
    amount: Decimal
    month_label: str


@dataclass(frozen=True)
class Customer:
    """Snapshot klienta.

    Właścicielem kolekcji klientów jest warstwa wyżej (UI/storage), core
    tylko czyta i zwraca nowe wartości (dataclasses.replace), nic nie mutuje.
    """

    id: str
    full_name: str
    service_type: ServiceType
    client_time_type: ClientTimeType
    phone_number: str
    service_start_date: date
    # następny niezapłacony termin płatności
    billing_date: date
    monthly_price: Decimal
    current_payment_status: PaymentStatus
    payment_history: tuple[PaymentRecord, ...] = field(default_factory=tuple)
    plan_speed: Optional[str] = None
    observations: Optional[str] = None
    profile_name: Optional[str] = None


@dataclass(frozen=True)
class InvoicePeriod:
    start: date
    end: date


@dataclass(frozen=True)
class SavedInvoice:
    id: str
    customer_id: str
    customer_name: str
    issue_date: date
    service_type: ServiceType
    client_time_type: ClientTimeType
    period_start: date
    period_end: date
    amount: Decimal
    # audyt: billing_date klienta w momencie wystawienia
    original_billing_date: date
