import unittest
from datetime import date
from decimal import Decimal

from netbill.billing.schemas import CustomerFilterRequest, PaymentRecordIn
from netbill.domains.billing.enums import DisplayStatus


class PaymentRecordInTests(unittest.TestCase):
    def test_browser_iso_string_keeps_its_utc_date(self):
        # 5 marca o północy w UTC+1 zapisany przez przeglądarkę jako 4 marca 23:00 UTC
        p = PaymentRecordIn(date="2024-03-04T23:00:00.000Z", amount="30", month_label="marzo 2024")
        self.assertEqual(p.date, date(2024, 3, 4))

    def test_plain_date_string(self):
        p = PaymentRecordIn(date="2024-03-05", amount="30", month_label="marzo 2024")
        self.assertEqual(p.date, date(2024, 3, 5))

    def test_non_positive_amount_is_left_to_the_ledger(self):
        p = PaymentRecordIn(date="2024-03-05", amount="0", month_label="marzo 2024")
        self.assertEqual(p.amount, Decimal("0"))


class CustomerFilterRequestTests(unittest.TestCase):
    def test_spanish_labels_and_all(self):
        self.assertEqual(CustomerFilterRequest(customers=[], status="Próximo a vencer").status, DisplayStatus.DUE_SOON)
        self.assertIsNone(CustomerFilterRequest(customers=[], status="Todos").status)


if __name__ == "__main__":
    unittest.main()
