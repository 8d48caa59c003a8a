from __future__ import annotations

from enum import StrEnum


class PaymentStatus(StrEnum):
    """Status zapisany na kliencie (ustawiany ręcznie albo przez rejestrację płatności)."""

    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


class DisplayStatus(StrEnum):
    """Status wyliczany do wyświetlenia. Nigdy nie zapisujemy go z powrotem na kliencie."""

    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"
    DUE_SOON = "due_soon"


class ServiceType(StrEnum):
    ROUTER = "ROUTER"
    EAP = "EAP"


class ClientTimeType(StrEnum):
    # tylko etykieta; cykl rozliczeniowy zawsze jest miesięczny
    HOURLY = "hourly"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


DISPLAY_STATUS_LABELS: dict[DisplayStatus, str] = {
    DisplayStatus.PAID: "Pagado",
    DisplayStatus.PENDING: "Pendiente",
    DisplayStatus.OVERDUE: "Vencido",
    DisplayStatus.DUE_SOON: "Próximo a vencer",
}

# Wartości z eksportu localStorage starej aplikacji (JSON po hiszpańsku).
LEGACY_PAYMENT_STATUS: dict[str, PaymentStatus] = {
    "Pagado": PaymentStatus.PAID,
    "Pendiente": PaymentStatus.PENDING,
    "Vencido": PaymentStatus.OVERDUE,
}

LEGACY_CLIENT_TIME_TYPE: dict[str, ClientTimeType] = {
    "Hora": ClientTimeType.HOURLY,
    "Semanal": ClientTimeType.WEEKLY,
    "Mensual": ClientTimeType.MONTHLY,
}
