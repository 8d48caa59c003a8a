from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DomainError(Exception):
    """Bazowy błąd domenowy (do użycia w services/use-cases).

    Core nic nie loguje, tylko sygnalizuje. Mapowanie na HTTP robi
    globalny exception handler w netbill.app.main.
    """

    message: str
    code: str = "domain_error"
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(DomainError):
    code: str = "validation_error"


@dataclass(frozen=True)
class InvalidAmount(ValidationError):
    code: str = "invalid_amount"


@dataclass(frozen=True)
class InvalidDate(ValidationError):
    code: str = "invalid_date"


@dataclass(frozen=True)
class NotFoundError(DomainError):
    code: str = "not_found"


@dataclass(frozen=True)
class MissingCustomer(NotFoundError):
    code: str = "customer_not_found"


@dataclass(frozen=True)
class MissingPayment(NotFoundError):
    code: str = "payment_not_found"


@dataclass(frozen=True)
class MissingInvoice(NotFoundError):
    code: str = "invoice_not_found"
