from __future__ import annotations

from datetime import date

from netbill.services.billing.date_math import add_months, as_date

# Cykl jest zawsze miesięczny, niezależnie od client_time_type.
CYCLE_MONTHS = 1


def next_billing_date(current: date) -> date:
    """Kolejny termin płatności: +1 miesiąc kalendarzowy (31.01 -> 29.02 w roku przestępnym)."""
    return add_months(as_date(current, field="billing_date"), CYCLE_MONTHS)
