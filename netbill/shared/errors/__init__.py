from .domains import (
    DomainError,
    InvalidAmount,
    InvalidDate,
    MissingCustomer,
    MissingInvoice,
    MissingPayment,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidAmount",
    "InvalidDate",
    "NotFoundError",
    "MissingCustomer",
    "MissingPayment",
    "MissingInvoice",
]
