from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from netbill.shared.errors import InvalidAmount


def q2(amount: Decimal) -> Decimal:
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def as_positive_amount(value: Any, *, field: str = "amount") -> Decimal:
    """Kwota > 0 jako Decimal. float idzie przez str(), żeby nie ciągnąć binarnych ogonów."""
    if isinstance(value, bool) or value is None:
        raise InvalidAmount(message=f"Kwota jest wymagana: {field}", details={"field": field, "value": repr(value)})
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidAmount(
            message=f"Nieprawidłowa kwota: {field}",
            details={"field": field, "value": repr(value)},
        ) from e

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount(
            message=f"Kwota musi być dodatnia: {field}",
            details={"field": field, "value": str(amount)},
        )
    return amount
