import unittest
from datetime import date, datetime, timedelta

from netbill.domains.billing.enums import DisplayStatus, PaymentStatus
from netbill.services.billing.status_service import derive_status, display_label
from netbill.shared.errors import InvalidDate, ValidationError

TODAY = date(2024, 3, 10)


def _in(days: int) -> date:
    return TODAY + timedelta(days=days)


class DeriveStatusTests(unittest.TestCase):
    def test_due_today_pending_is_due_soon(self):
        self.assertEqual(derive_status(TODAY, PaymentStatus.PENDING, TODAY), DisplayStatus.DUE_SOON)

    def test_five_days_late_pending_is_overdue(self):
        self.assertEqual(derive_status(_in(-5), PaymentStatus.PENDING, TODAY), DisplayStatus.OVERDUE)

    def test_due_soon_window_wins_over_any_stored_status(self):
        for days in range(0, 4):
            for stored in PaymentStatus:
                with self.subTest(days=days, stored=stored):
                    self.assertEqual(derive_status(_in(days), stored, TODAY), DisplayStatus.DUE_SOON)

    def test_past_due_pending_is_always_overdue(self):
        for days in range(-60, 0):
            with self.subTest(days=days):
                self.assertEqual(derive_status(_in(days), PaymentStatus.PENDING, TODAY), DisplayStatus.OVERDUE)

    def test_paid_outside_window_stays_paid(self):
        for days in (4, 5, 30, 365):
            with self.subTest(days=days):
                self.assertEqual(derive_status(_in(days), PaymentStatus.PAID, TODAY), DisplayStatus.PAID)

    def test_paid_with_past_billing_date_is_still_paid(self):
        self.assertEqual(derive_status(_in(-10), PaymentStatus.PAID, TODAY), DisplayStatus.PAID)

    def test_explicit_overdue_flag_is_honored(self):
        self.assertEqual(derive_status(_in(20), PaymentStatus.OVERDUE, TODAY), DisplayStatus.OVERDUE)

    def test_pending_far_in_future_is_pending(self):
        self.assertEqual(derive_status(_in(4), PaymentStatus.PENDING, TODAY), DisplayStatus.PENDING)

    def test_time_of_day_is_ignored(self):
        billing = datetime(2024, 3, 13, 23, 59)
        now = datetime(2024, 3, 10, 8, 0)
        self.assertEqual(derive_status(billing, PaymentStatus.PAID, now), DisplayStatus.DUE_SOON)
        self.assertEqual(
            derive_status(datetime(2024, 3, 9, 23, 0), PaymentStatus.PENDING, datetime(2024, 3, 10, 0, 1)),
            DisplayStatus.OVERDUE,
        )

    def test_custom_window(self):
        self.assertEqual(
            derive_status(_in(1), PaymentStatus.PENDING, TODAY, due_soon_days=0),
            DisplayStatus.PENDING,
        )
        self.assertEqual(
            derive_status(TODAY, PaymentStatus.PAID, TODAY, due_soon_days=0),
            DisplayStatus.DUE_SOON,
        )

    def test_accepts_plain_string_values_of_stored_status(self):
        self.assertEqual(derive_status(_in(30), "paid", TODAY), DisplayStatus.PAID)

    def test_deterministic(self):
        first = derive_status(_in(-2), PaymentStatus.PENDING, TODAY)
        second = derive_status(_in(-2), PaymentStatus.PENDING, TODAY)
        self.assertEqual(first, second)

    def test_rejects_unknown_stored_status(self):
        with self.assertRaises(ValidationError):
            derive_status(TODAY, "Pagado", TODAY)

    def test_rejects_missing_dates(self):
        with self.assertRaises(InvalidDate):
            derive_status(None, PaymentStatus.PENDING, TODAY)
        with self.assertRaises(InvalidDate):
            derive_status(TODAY, PaymentStatus.PENDING, "2024-03-10")


class DisplayLabelTests(unittest.TestCase):
    def test_labels(self):
        self.assertEqual(display_label(DisplayStatus.DUE_SOON), "Próximo a vencer")
        self.assertEqual(display_label(DisplayStatus.OVERDUE), "Vencido")


if __name__ == "__main__":
    unittest.main()
