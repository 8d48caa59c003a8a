from .enums import ClientTimeType, DisplayStatus, PaymentStatus, ServiceType
from .models import Customer, InvoicePeriod, NewPayment, PaymentRecord, SavedInvoice

__all__ = [
    "PaymentStatus",
    "DisplayStatus",
    "ServiceType",
    "ClientTimeType",
    "Customer",
    "PaymentRecord",
    "NewPayment",
    "InvoicePeriod",
    "SavedInvoice",
]
