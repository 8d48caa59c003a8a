# netbill/billing/api/billing_routes.py
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Request

from netbill.app.config import Settings, get_settings
from netbill.app.logging import get_logger
from netbill.billing.schemas import (
    CustomerCreateRequest,
    CustomerDeleteRequest,
    CustomerFilterRequest,
    CustomerIn,
    CustomerOut,
    CustomerRecordIn,
    DashboardOut,
    DashboardRequest,
    InvoiceRequest,
    PaymentCreateRequest,
    PaymentDeleteRequest,
    PaymentRecordOut,
    SavedInvoiceOut,
    StatusRequest,
)
from netbill.domains.billing.models import Customer, NewPayment, PaymentRecord, SavedInvoice
from netbill.services.billing.date_math import Clock, SystemClock
from netbill.services.billing.invoice_service import build_invoice
from netbill.services.billing.payment_ledger import delete_payment, record_payment
from netbill.services.billing.status_service import derive_customer_status, display_label
from netbill.services.customers.customer_use_cases import (
    CustomerForm,
    create_customer,
    dashboard_summary,
    delete_customer,
    filter_customers,
    list_profiles,
)
from netbill.shared.formatting import format_currency

router = APIRouter(prefix="/billing", tags=["billing"])

log = get_logger(__name__)


def settings_dep() -> Settings:
    return get_settings()


def get_clock(request: Request) -> Clock:
    return getattr(request.app.state, "clock", None) or SystemClock()


def _today(explicit: Optional[date], clock: Clock) -> date:
    return explicit or clock.today()


def _form(c: CustomerIn) -> CustomerForm:
    return CustomerForm(
        full_name=c.full_name,
        service_type=c.service_type,
        client_time_type=c.client_time_type,
        phone_number=c.phone_number,
        service_start_date=c.service_start_date,
        billing_date=c.billing_date,
        monthly_price=c.monthly_price,
        current_payment_status=c.current_payment_status,
        plan_speed=c.plan_speed,
        observations=c.observations,
        profile_name=c.profile_name,
    )


def _to_customer(c: CustomerRecordIn) -> Customer:
    # rekordy bez id (stary eksport) dostają id pozycyjne, żeby dało się je usunąć
    history = tuple(
        PaymentRecord(id=p.id or f"{c.id}-{i}", date=p.date, amount=p.amount, month_label=p.month_label)
        for i, p in enumerate(c.payment_history, start=1)
    )
    return Customer(
        id=c.id,
        full_name=c.full_name,
        service_type=c.service_type,
        client_time_type=c.client_time_type,
        phone_number=c.phone_number,
        service_start_date=c.service_start_date,
        billing_date=c.billing_date,
        monthly_price=c.monthly_price,
        current_payment_status=c.current_payment_status,
        payment_history=history,
        plan_speed=c.plan_speed,
        observations=c.observations,
        profile_name=c.profile_name,
    )


def _customer_out(c: Customer, *, today: date, settings: Settings) -> CustomerOut:
    status = derive_customer_status(c, today, due_soon_days=settings.billing_due_soon_days)
    return CustomerOut(
        id=c.id,
        full_name=c.full_name,
        service_type=c.service_type,
        client_time_type=c.client_time_type,
        phone_number=c.phone_number,
        service_start_date=c.service_start_date,
        billing_date=c.billing_date,
        monthly_price=c.monthly_price,
        current_payment_status=c.current_payment_status,
        payment_history=[
            PaymentRecordOut(id=p.id, date=p.date, amount=p.amount, month_label=p.month_label)
            for p in c.payment_history
        ],
        plan_speed=c.plan_speed,
        observations=c.observations,
        profile_name=c.profile_name,
        display_status=status,
        display_label=display_label(status),
    )


def _invoice_out(inv: SavedInvoice, *, settings: Settings) -> SavedInvoiceOut:
    return SavedInvoiceOut(
        id=inv.id,
        customer_id=inv.customer_id,
        customer_name=inv.customer_name,
        issue_date=inv.issue_date,
        service_type=inv.service_type,
        client_time_type=inv.client_time_type,
        period_start=inv.period_start,
        period_end=inv.period_end,
        amount=inv.amount,
        amount_display=format_currency(inv.amount, settings.billing_currency),
        original_billing_date=inv.original_billing_date,
    )


@router.post("/status", response_model=list[CustomerOut])
def billing_status(
    payload: StatusRequest,
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(settings_dep),
):
    today = _today(payload.today, clock)
    return [_customer_out(_to_customer(c), today=today, settings=settings) for c in payload.customers]


@router.post("/payments", response_model=CustomerOut)
def billing_payment_create(
    payload: PaymentCreateRequest,
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(settings_dep),
):
    customer = _to_customer(payload.customer)
    updated = record_payment(
        customer,
        NewPayment(date=payload.payment.date, amount=payload.payment.amount, month_label=payload.payment.month_label),
    )
    log.info(
        "payment recorded",
        extra={"customer_id": customer.id, "billing_date": updated.billing_date.isoformat()},
    )
    return _customer_out(updated, today=_today(payload.today, clock), settings=settings)


@router.post("/payments/delete", response_model=CustomerOut)
def billing_payment_delete(
    payload: PaymentDeleteRequest,
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(settings_dep),
):
    customer = _to_customer(payload.customer)
    updated = delete_payment(customer, payload.payment_id)
    log.info("payment deleted", extra={"customer_id": customer.id, "payment_id": payload.payment_id})
    return _customer_out(updated, today=_today(payload.today, clock), settings=settings)


@router.post("/invoices", response_model=SavedInvoiceOut)
def billing_invoice_create(
    payload: InvoiceRequest,
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(settings_dep),
):
    inv = build_invoice(
        _to_customer(payload.customer),
        _today(payload.issue_date, clock),
        prefix=settings.billing_invoice_prefix,
    )
    return _invoice_out(inv, settings=settings)


@router.post("/customers", response_model=CustomerOut)
def billing_customer_create(
    payload: CustomerCreateRequest,
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(settings_dep),
):
    customer = create_customer(_form(payload.customer))
    log.info("customer created", extra={"customer_id": customer.id})
    return _customer_out(customer, today=_today(payload.today, clock), settings=settings)


@router.post("/customers/delete", response_model=list[CustomerOut])
def billing_customer_delete(
    payload: CustomerDeleteRequest,
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(settings_dep),
):
    today = _today(payload.today, clock)
    rows = delete_customer([_to_customer(c) for c in payload.customers], payload.customer_id)
    log.info("customer deleted", extra={"customer_id": payload.customer_id})
    return [_customer_out(c, today=today, settings=settings) for c in rows]


@router.post("/customers/filter", response_model=list[CustomerOut])
def billing_customers_filter(
    payload: CustomerFilterRequest,
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(settings_dep),
):
    today = _today(payload.today, clock)
    rows = filter_customers(
        [_to_customer(c) for c in payload.customers],
        today=today,
        search_term=payload.search_term,
        status=payload.status,
        profile=payload.profile,
        due_soon_days=settings.billing_due_soon_days,
    )
    return [_customer_out(c, today=today, settings=settings) for c in rows]


@router.post("/dashboard", response_model=DashboardOut)
def billing_dashboard(
    payload: DashboardRequest,
    settings: Settings = Depends(settings_dep),
):
    customers = [_to_customer(c) for c in payload.customers]
    summary = dashboard_summary(customers)
    return DashboardOut(
        total_customers=summary.total_customers,
        customers_by_service_type=summary.customers_by_service_type,
        total_monthly_income=summary.total_monthly_income,
        total_monthly_income_display=format_currency(summary.total_monthly_income, settings.billing_currency),
        profiles=list_profiles(customers),
    )
