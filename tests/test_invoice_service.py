import unittest
from datetime import date, datetime, timedelta
from decimal import Decimal

from netbill.domains.billing.enums import ClientTimeType, PaymentStatus, ServiceType
from netbill.domains.billing.models import Customer, InvoicePeriod
from netbill.services.billing.billing_cycle import next_billing_date
from netbill.services.billing.invoice_service import (
    add_saved_invoice,
    build_invoice,
    compute_invoice_period,
    delete_saved_invoice,
    generate_invoice_id,
)
from netbill.shared.errors import InvalidDate, MissingInvoice, ValidationError


def _customer(**overrides) -> Customer:
    data = dict(
        id="abcd1234",
        full_name="Ana García López",
        service_type=ServiceType.ROUTER,
        client_time_type=ClientTimeType.WEEKLY,
        phone_number="+54 9 11 23456789",
        service_start_date=date(2023, 10, 10),
        billing_date=date(2024, 3, 10),
        monthly_price=Decimal("25.50"),
        current_payment_status=PaymentStatus.PAID,
    )
    data.update(overrides)
    return Customer(**data)


class InvoiceIdTests(unittest.TestCase):
    def test_format(self):
        self.assertEqual(generate_invoice_id("abcd1234", date(2024, 3, 5)), "INV-ABCD-20240305")

    def test_stable_for_same_inputs(self):
        a = generate_invoice_id("x9y8z7", datetime(2024, 12, 1, 9, 0))
        b = generate_invoice_id("x9y8z7", datetime(2024, 12, 1, 18, 30))
        self.assertEqual(a, b)
        self.assertEqual(a, "INV-X9Y8-20241201")

    def test_short_customer_id(self):
        self.assertEqual(generate_invoice_id("7", date(2024, 1, 2)), "INV-7-20240102")

    def test_custom_prefix(self):
        self.assertEqual(generate_invoice_id("abcd", date(2024, 1, 2), prefix="FAC"), "FAC-ABCD-20240102")

    def test_rejects_empty_customer_id(self):
        with self.assertRaises(ValidationError):
            generate_invoice_id("", date(2024, 1, 2))

    def test_rejects_missing_issue_date(self):
        with self.assertRaises(InvalidDate):
            generate_invoice_id("abcd", None)


class InvoicePeriodTests(unittest.TestCase):
    def test_period_ends_day_before_next_billing(self):
        self.assertEqual(
            compute_invoice_period(date(2024, 3, 10)),
            InvoicePeriod(start=date(2024, 3, 10), end=date(2024, 4, 9)),
        )

    def test_month_end_billing_date(self):
        self.assertEqual(compute_invoice_period(date(2024, 1, 31)).end, date(2024, 2, 28))

    def test_end_plus_one_day_is_next_billing_date(self):
        d = date(2023, 1, 1)
        while d < date(2025, 1, 1):
            with self.subTest(d=d):
                self.assertEqual(compute_invoice_period(d).end + timedelta(days=1), next_billing_date(d))
            d += timedelta(days=1)


class BuildInvoiceTests(unittest.TestCase):
    def test_snapshot_of_customer(self):
        inv = build_invoice(_customer(), date(2024, 3, 5))

        self.assertEqual(inv.id, "INV-ABCD-20240305")
        self.assertEqual(inv.customer_id, "abcd1234")
        self.assertEqual(inv.customer_name, "Ana García López")
        self.assertEqual(inv.issue_date, date(2024, 3, 5))
        self.assertEqual(inv.service_type, ServiceType.ROUTER)
        self.assertEqual(inv.client_time_type, ClientTimeType.WEEKLY)
        self.assertEqual(inv.period_start, date(2024, 3, 10))
        self.assertEqual(inv.period_end, date(2024, 4, 9))
        self.assertEqual(inv.amount, Decimal("25.50"))
        self.assertEqual(inv.original_billing_date, date(2024, 3, 10))

    def test_invoice_is_immutable(self):
        inv = build_invoice(_customer(), date(2024, 3, 5))
        with self.assertRaises(AttributeError):
            inv.amount = Decimal("1")  # type: ignore[misc]


class SavedInvoiceCollectionTests(unittest.TestCase):
    def test_add_and_delete(self):
        first = build_invoice(_customer(), date(2024, 3, 5))
        other = build_invoice(_customer(id="zzzz0000"), date(2024, 3, 5))

        invoices = add_saved_invoice([], first)
        invoices = add_saved_invoice(invoices, other)
        self.assertEqual(invoices, [first, other])

        self.assertEqual(delete_saved_invoice(invoices, first.id), [other])

    def test_delete_removes_same_day_duplicates(self):
        inv = build_invoice(_customer(), date(2024, 3, 5))
        self.assertEqual(delete_saved_invoice([inv, inv], inv.id), [])

    def test_delete_missing(self):
        with self.assertRaises(MissingInvoice):
            delete_saved_invoice([], "INV-NONE-20240101")


if __name__ == "__main__":
    unittest.main()
