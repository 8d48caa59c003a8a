"""Formatowanie dat i kwot do wyświetlenia (locale es, jak w UI)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from netbill.services.billing.date_math import as_date
from netbill.services.billing.money import q2

MONTHS_ES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)

CURRENCY_SYMBOLS = {
    "USD": "US$",
    "EUR": "€",
}

_NBSP = "\u00a0"


def month_name(d: date) -> str:
    return MONTHS_ES[as_date(d).month - 1]


def format_date(d: date) -> str:
    """5 de marzo de 2024"""
    d = as_date(d)
    return f"{d.day} de {month_name(d)} de {d.year}"


def month_label(d: date) -> str:
    """marzo 2024: domyślna etykieta "za który miesiąc" przy płatności."""
    d = as_date(d)
    return f"{month_name(d)} {d.year}"


def _group_thousands(digits: str) -> str:
    # es-ES nie grupuje liczb 4-cyfrowych (1234,50), dopiero od 10 000
    if len(digits) < 5:
        return digits
    groups = []
    while digits:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    return ".".join(groups)


def format_currency(amount: Decimal, currency: str = "USD") -> str:
    value = q2(Decimal(amount))
    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{abs(value):.2f}".partition(".")
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())
    return f"{sign}{_group_thousands(integer)},{fraction}{_NBSP}{symbol}"
