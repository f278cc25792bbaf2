import unittest
from datetime import date, datetime
from decimal import Decimal

from ledger_analytics.time_series import SeriesPoint, bucket_income_expense
from ledger_analytics.transactions import Transaction


def _txn(id, amount, date, increment):
    return Transaction(
        id=id,
        amount=Decimal(amount),
        increment=increment,
        current_balance=Decimal("0"),
        date=date,
    )


class TimeSeriesBucketerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.now = datetime(2024, 3, 15, 12, 0)
        self.transactions = [
            _txn(1, "400", "2022-12-31T10:00:00", True),
            _txn(2, "40", "2023-01-01T00:00:00", False),
            _txn(3, "90", "2024-01-31T23:00:00", False),
            _txn(4, "1000", "2024-02-01T00:00:00", True),
            _txn(5, "25", "2024-03-10T09:15:00", False),
        ]

    def test_points_split_income_and_expense(self) -> None:
        points = bucket_income_expense(self.transactions, "all-time", now=self.now)

        self.assertEqual(
            points[3], SeriesPoint(date="Feb 1, 2024", income=Decimal("1000"), expense=Decimal("0"))
        )
        self.assertEqual(
            points[4], SeriesPoint(date="Mar 10, 2024", income=Decimal("0"), expense=Decimal("25"))
        )

    def test_all_time_keeps_every_record_in_order(self) -> None:
        points = bucket_income_expense(self.transactions, "all-time", now=self.now)

        self.assertEqual(
            [point.date for point in points],
            ["Dec 31, 2022", "Jan 1, 2023", "Jan 31, 2024", "Feb 1, 2024", "Mar 10, 2024"],
        )

    def test_monthly_starts_at_previous_month(self) -> None:
        points = bucket_income_expense(self.transactions, "monthly", now=self.now)

        self.assertEqual([point.date for point in points], ["Feb 1, 2024", "Mar 10, 2024"])

    def test_monthly_in_january_reaches_back_to_december(self) -> None:
        transactions = [
            _txn(1, "10", "2023-11-30", False),
            _txn(2, "20", "2023-12-01", False),
            _txn(3, "30", "2024-01-05", True),
        ]

        points = bucket_income_expense(transactions, "monthly", now=datetime(2024, 1, 10))

        self.assertEqual([point.date for point in points], ["Dec 1, 2023", "Jan 5, 2024"])

    def test_yearly_starts_at_previous_january(self) -> None:
        points = bucket_income_expense(self.transactions, "yearly", now=self.now)

        self.assertEqual(len(points), 4)
        self.assertEqual(points[0].date, "Jan 1, 2023")

    def test_custom_compares_raw_timestamps(self) -> None:
        points = bucket_income_expense(
            self.transactions,
            "custom",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 2, 1),
            now=self.now,
        )

        self.assertEqual([point.date for point in points], ["Jan 31, 2024", "Feb 1, 2024"])

    def test_custom_end_date_excludes_later_same_day(self) -> None:
        points = bucket_income_expense(
            self.transactions,
            "custom",
            start_date=date(2024, 3, 1),
            end_date=date(2024, 3, 10),
            now=self.now,
        )

        self.assertEqual(points, [])

    def test_custom_without_both_bounds_is_unrestricted(self) -> None:
        points = bucket_income_expense(
            self.transactions, "custom", start_date=date(2024, 1, 1), now=self.now
        )

        self.assertEqual(len(points), len(self.transactions))

    def test_custom_start_after_end_returns_empty(self) -> None:
        points = bucket_income_expense(
            self.transactions,
            "custom",
            start_date=date(2024, 3, 1),
            end_date=date(2024, 1, 1),
            now=self.now,
        )

        self.assertEqual(points, [])

    def test_same_day_points_are_not_merged(self) -> None:
        transactions = [
            _txn(1, "10", "2024-03-01T08:00:00", False),
            _txn(2, "15", "2024-03-01T09:00:00", True),
        ]

        points = bucket_income_expense(transactions, "all-time")

        self.assertEqual(len(points), 2)
        self.assertEqual(points[0].date, points[1].date)

    def test_empty_input(self) -> None:
        self.assertEqual(bucket_income_expense([], "monthly", now=self.now), [])

    def test_unsupported_window_raises(self) -> None:
        with self.assertRaises(ValueError):
            bucket_income_expense(self.transactions, "weekly", now=self.now)


if __name__ == "__main__":
    unittest.main()
