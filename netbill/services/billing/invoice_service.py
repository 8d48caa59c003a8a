from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from netbill.domains.billing.models import Customer, InvoicePeriod, SavedInvoice
from netbill.services.billing.billing_cycle import next_billing_date
from netbill.services.billing.date_math import as_date
from netbill.shared.errors import MissingInvoice, ValidationError

INVOICE_PREFIX = "INV"


def compute_invoice_period(billing_date: date) -> InvoicePeriod:
    """Okres usługi na fakturze: od billing_date do dnia przed kolejnym terminem."""
    start = as_date(billing_date, field="billing_date")
    end = next_billing_date(start) - timedelta(days=1)
    return InvoicePeriod(start=start, end=end)


def generate_invoice_id(customer_id: str, issue_date: date, *, prefix: str = INVOICE_PREFIX) -> str:
    """INV-<4 pierwsze znaki id klienta, wielkie litery>-<YYYYMMDD>.

    Deterministyczne: ten sam klient tego samego dnia dostaje ten sam numer
    (duplikaty w ciągu dnia są dopuszczalne).
    """
    cid = str(customer_id or "").strip()
    if not cid:
        raise ValidationError(message="customer_id jest wymagane do numeru faktury", details={"field": "customer_id"})
    issued = as_date(issue_date, field="issue_date")
    return f"{prefix}-{cid[:4].upper()}-{issued:%Y%m%d}"


def build_invoice(customer: Customer, issue_date: date, *, prefix: str = INVOICE_PREFIX) -> SavedInvoice:
    issued = as_date(issue_date, field="issue_date")
    period = compute_invoice_period(customer.billing_date)
    return SavedInvoice(
        id=generate_invoice_id(customer.id, issued, prefix=prefix),
        customer_id=customer.id,
        customer_name=customer.full_name,
        issue_date=issued,
        service_type=customer.service_type,
        client_time_type=customer.client_time_type,
        period_start=period.start,
        period_end=period.end,
        amount=customer.monthly_price,
        original_billing_date=period.start,
    )


def add_saved_invoice(invoices: Iterable[SavedInvoice], invoice: SavedInvoice) -> list[SavedInvoice]:
    return [*invoices, invoice]


def delete_saved_invoice(invoices: Iterable[SavedInvoice], invoice_id: str) -> list[SavedInvoice]:
    """Usuwa wszystkie faktury o danym id (numer nie jest unikalny w obrębie dnia)."""
    current = list(invoices)
    kept = [inv for inv in current if inv.id != invoice_id]
    if len(kept) == len(current):
        raise MissingInvoice(message=f"Faktura {invoice_id} nie istnieje", details={"invoice_id": invoice_id})
    return kept
