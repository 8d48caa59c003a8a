from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, Optional

from netbill.domains.billing.enums import ClientTimeType, DisplayStatus, PaymentStatus, ServiceType
from netbill.domains.billing.models import Customer
from netbill.services.billing.billing_cycle import next_billing_date
from netbill.services.billing.date_math import as_date
from netbill.services.billing.money import as_positive_amount
from netbill.services.billing.payment_ledger import find_customer
from netbill.services.billing.status_service import DUE_SOON_DAYS, derive_customer_status, display_label
from netbill.shared.formatting import month_name

ALL_PROFILES = "all"


@dataclass(frozen=True)
class CustomerForm:
    full_name: str
    service_type: ServiceType
    client_time_type: ClientTimeType
    phone_number: str
    service_start_date: date
    billing_date: date
    monthly_price: Decimal
    current_payment_status: PaymentStatus
    plan_speed: Optional[str] = None
    observations: Optional[str] = None
    profile_name: Optional[str] = None


@dataclass(frozen=True)
class DashboardSummary:
    total_customers: int
    customers_by_service_type: dict[ServiceType, int]
    total_monthly_income: Decimal


def _normalize_profile(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    name = name.strip()
    return name or None


def _new_customer_id() -> str:
    return str(uuid.uuid4())


def create_customer(form: CustomerForm, *, new_id: Callable[[], str] = _new_customer_id) -> Customer:
    """Nowy klient z formularza.

    Jeśli w formularzu zaznaczono PAID, podana data to okres już opłacony,
    zapisujemy więc kolejny termin (billing_date = następny niezapłacony).
    """
    billing = as_date(form.billing_date, field="billing_date")
    if form.current_payment_status == PaymentStatus.PAID:
        billing = next_billing_date(billing)

    return Customer(
        id=new_id(),
        full_name=form.full_name.strip(),
        service_type=ServiceType(form.service_type),
        client_time_type=ClientTimeType(form.client_time_type),
        phone_number=form.phone_number.strip(),
        service_start_date=as_date(form.service_start_date, field="service_start_date"),
        billing_date=billing,
        monthly_price=as_positive_amount(form.monthly_price, field="monthly_price"),
        current_payment_status=PaymentStatus(form.current_payment_status),
        payment_history=(),
        plan_speed=form.plan_speed,
        observations=form.observations,
        profile_name=_normalize_profile(form.profile_name),
    )


def update_customer(existing: Customer, form: CustomerForm) -> Customer:
    # edycja nie przesuwa cyklu i nie rusza historii płatności
    return replace(
        existing,
        full_name=form.full_name.strip(),
        service_type=ServiceType(form.service_type),
        client_time_type=ClientTimeType(form.client_time_type),
        phone_number=form.phone_number.strip(),
        service_start_date=as_date(form.service_start_date, field="service_start_date"),
        billing_date=as_date(form.billing_date, field="billing_date"),
        monthly_price=as_positive_amount(form.monthly_price, field="monthly_price"),
        current_payment_status=PaymentStatus(form.current_payment_status),
        plan_speed=form.plan_speed,
        observations=form.observations,
        profile_name=_normalize_profile(form.profile_name),
    )


def delete_customer(customers: Iterable[Customer], customer_id: str) -> list[Customer]:
    """Usuwa klienta z kolekcji; brak id -> MissingCustomer, kolekcja bez zmian."""
    current = list(customers)
    find_customer(current, customer_id)
    return [c for c in current if c.id != customer_id]


def filter_customers(
    customers: Iterable[Customer],
    *,
    today: date,
    search_term: str = "",
    status: DisplayStatus | None = None,
    profile: str | None = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> list[Customer]:
    """Filtr listy jak w UI: fraza (imię, miesiąc terminu, etykieta statusu), status, profil."""
    term = (search_term or "").strip().lower()
    wanted_profile = _normalize_profile(profile)
    if wanted_profile == ALL_PROFILES:
        wanted_profile = None

    out: list[Customer] = []
    for c in customers:
        derived = derive_customer_status(c, today, due_soon_days=due_soon_days)

        if wanted_profile is not None and c.profile_name != wanted_profile:
            continue
        if status is not None and derived != status:
            continue
        if term:
            haystack = (c.full_name.lower(), month_name(c.billing_date), display_label(derived).lower())
            if not any(term in h for h in haystack):
                continue
        out.append(c)
    return out


def list_profiles(customers: Iterable[Customer]) -> list[str]:
    return sorted({c.profile_name for c in customers if c.profile_name})


def dashboard_summary(customers: Iterable[Customer]) -> DashboardSummary:
    by_type = {t: 0 for t in ServiceType}
    total = 0
    income = Decimal("0")
    for c in customers:
        total += 1
        by_type[c.service_type] += 1
        income += c.monthly_price
    return DashboardSummary(
        total_customers=total,
        customers_by_service_type=by_type,
        total_monthly_income=income,
    )
