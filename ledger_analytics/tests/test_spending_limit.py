import unittest
from decimal import Decimal

from ledger_analytics.spending_limit import calculate_spending_limit, monthly_expense_totals
from ledger_analytics.transactions import Transaction


def _txn(amount, date, increment=False):
    return Transaction(
        id=date,
        amount=Decimal(amount),
        increment=increment,
        current_balance=Decimal("0"),
        date=date,
    )


class SpendingLimitTests(unittest.TestCase):
    def test_averages_monthly_expense_totals(self) -> None:
        transactions = [
            _txn("100", "2024-01-15"),
            _txn("200", "2024-02-10"),
        ]

        self.assertEqual(calculate_spending_limit(transactions), Decimal("150.00"))

    def test_ignores_credits(self) -> None:
        transactions = [
            _txn("100", "2024-01-15"),
            _txn("5000", "2024-01-20", increment=True),
            _txn("300", "2024-03-02"),
        ]

        self.assertEqual(calculate_spending_limit(transactions), Decimal("200.00"))

    def test_only_credits_returns_zero(self) -> None:
        transactions = [
            _txn("100", "2024-01-15", increment=True),
            _txn("200", "2024-02-10", increment=True),
        ]

        self.assertEqual(calculate_spending_limit(transactions), Decimal("0"))

    def test_empty_returns_zero(self) -> None:
        self.assertEqual(calculate_spending_limit([]), Decimal("0.00"))

    def test_months_without_expenses_are_not_counted(self) -> None:
        transactions = [
            _txn("90", "2024-05-01"),
            _txn("30", "2024-01-31"),
            _txn("10", "2024-01-01"),
        ]

        self.assertEqual(calculate_spending_limit(transactions), Decimal("65.00"))

    def test_rounds_to_two_places(self) -> None:
        transactions = [
            _txn("10", "2024-01-01"),
            _txn("10", "2024-02-01"),
            _txn("11", "2024-03-01"),
        ]

        self.assertEqual(calculate_spending_limit(transactions), Decimal("10.33"))

    def test_applies_conversion_rate(self) -> None:
        transactions = [
            _txn("1000", "2024-01-15"),
            _txn("2000", "2024-02-10"),
        ]

        self.assertEqual(
            calculate_spending_limit(transactions, rate=Decimal("0.012")),
            Decimal("18.00"),
        )

    def test_monthly_totals_key_by_year_month(self) -> None:
        totals = monthly_expense_totals(
            [
                _txn("10", "2023-12-31T23:59:00"),
                _txn("5", "2024-12-01"),
                _txn("7", "2024-12-30"),
            ]
        )

        self.assertEqual(totals, {"2023-12": Decimal("10"), "2024-12": Decimal("12")})


if __name__ == "__main__":
    unittest.main()
