from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from netbill.domains.billing.enums import (
    DISPLAY_STATUS_LABELS,
    LEGACY_CLIENT_TIME_TYPE,
    LEGACY_PAYMENT_STATUS,
    ClientTimeType,
    DisplayStatus,
    PaymentStatus,
    ServiceType,
)

PHONE_PATTERN = r"^\+?[0-9\s-]{7,}$"


def _iso_date(v: Any) -> Any:
    # eksport z przeglądarki ma pełne ISO (2024-03-05T05:00:00.000Z), bierzemy samą datę.
    # Ograniczenie: to data w UTC. Północ lokalna na wschód od UTC
    # (2024-03-04T23:00:00.000Z dla 5 marca w UTC+1) da dzień wcześniej.
    if isinstance(v, str) and "T" in v:
        return v.split("T", 1)[0]
    return v


class PaymentRecordIn(BaseModel):
    id: Optional[str] = None
    date: dt.date
    # > 0 sprawdza core (InvalidAmount -> 400), nie schemat
    amount: Decimal
    month_label: str = Field(..., min_length=1)

    @field_validator("date", mode="before")
    @classmethod
    def _date_iso(cls, v: Any) -> Any:
        return _iso_date(v)


class PaymentRecordOut(BaseModel):
    id: str
    date: dt.date
    amount: Decimal
    month_label: str


class CustomerIn(BaseModel):
    """Dane z formularza klienta (bez id i historii)."""

    full_name: str = Field(..., min_length=3)
    service_type: ServiceType
    client_time_type: ClientTimeType
    phone_number: str = Field(..., min_length=7, pattern=PHONE_PATTERN)
    service_start_date: dt.date
    billing_date: dt.date
    monthly_price: Decimal
    current_payment_status: PaymentStatus
    plan_speed: Optional[str] = None
    observations: Optional[str] = None
    profile_name: Optional[str] = None

    @field_validator("service_start_date", "billing_date", mode="before")
    @classmethod
    def _dates_iso(cls, v: Any) -> Any:
        return _iso_date(v)

    @field_validator("current_payment_status", mode="before")
    @classmethod
    def _legacy_status(cls, v: Any) -> Any:
        return LEGACY_PAYMENT_STATUS.get(v, v) if isinstance(v, str) else v

    @field_validator("client_time_type", mode="before")
    @classmethod
    def _legacy_time_type(cls, v: Any) -> Any:
        return LEGACY_CLIENT_TIME_TYPE.get(v, v) if isinstance(v, str) else v


class CustomerRecordIn(CustomerIn):
    """Zapisany klient, tak jak trzyma go warstwa storage."""

    id: str = Field(..., min_length=1)
    payment_history: list[PaymentRecordIn] = Field(default_factory=list)


class CustomerOut(BaseModel):
    id: str
    full_name: str
    service_type: ServiceType
    client_time_type: ClientTimeType
    phone_number: str
    service_start_date: dt.date
    billing_date: dt.date
    monthly_price: Decimal
    current_payment_status: PaymentStatus
    payment_history: list[PaymentRecordOut]
    plan_speed: Optional[str] = None
    observations: Optional[str] = None
    profile_name: Optional[str] = None

    # wyliczane przy każdym odczycie, nigdy nie wracają do storage
    display_status: DisplayStatus
    display_label: str


class SavedInvoiceOut(BaseModel):
    id: str
    customer_id: str
    customer_name: str
    issue_date: dt.date
    service_type: ServiceType
    client_time_type: ClientTimeType
    period_start: dt.date
    period_end: dt.date
    amount: Decimal
    amount_display: str
    original_billing_date: dt.date


class StatusRequest(BaseModel):
    customers: list[CustomerRecordIn]
    today: Optional[dt.date] = None


class PaymentCreateRequest(BaseModel):
    customer: CustomerRecordIn
    payment: PaymentRecordIn
    today: Optional[dt.date] = None


class PaymentDeleteRequest(BaseModel):
    customer: CustomerRecordIn
    payment_id: str = Field(..., min_length=1)
    today: Optional[dt.date] = None


class InvoiceRequest(BaseModel):
    customer: CustomerRecordIn
    issue_date: Optional[dt.date] = None


class CustomerCreateRequest(BaseModel):
    customer: CustomerIn
    today: Optional[dt.date] = None


class CustomerFilterRequest(BaseModel):
    customers: list[CustomerRecordIn]
    today: Optional[dt.date] = None
    search_term: str = ""
    status: Optional[DisplayStatus] = None
    profile: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _status_label(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        if v in ("", "Todos", "all"):
            return None
        by_label = {label: status for status, label in DISPLAY_STATUS_LABELS.items()}
        return by_label.get(v, v)


class DashboardRequest(BaseModel):
    customers: list[CustomerRecordIn]


class DashboardOut(BaseModel):
    total_customers: int
    customers_by_service_type: dict[ServiceType, int]
    total_monthly_income: Decimal
    total_monthly_income_display: str
    profiles: list[str]


class CustomerDeleteRequest(BaseModel):
    customers: list[CustomerRecordIn]
    customer_id: str = Field(..., min_length=1)
    today: Optional[dt.date] = None
