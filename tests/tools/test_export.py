"""Tests for CSV export."""

import csv
import io
from datetime import date, datetime

from tools.export import export_transactions, write_transactions_csv
from tests.helpers import make_transaction


class TestWriteTransactionsCsv:
    """Tests for write_transactions_csv."""

    def test_header_and_row_format(self):
        stream = io.StringIO(newline="")
        transactions = [
            make_transaction(
                "expense", "5", "Food", datetime(2024, 1, 5, 18, 30), description="Lunch"
            ),
            make_transaction("income", "1234.567", "Salary", datetime(2024, 2, 1)),
        ]

        count = write_transactions_csv(transactions, stream)

        rows = list(csv.reader(io.StringIO(stream.getvalue())))
        assert count == 2
        assert rows == [
            ["Date", "Amount", "Type", "Category", "Description"],
            ["2024-01-05", "5.00", "expense", "Food", "Lunch"],
            ["2024-02-01", "1234.57", "income", "Salary", "N/A"],
        ]

    def test_empty_description_uses_placeholder(self):
        stream = io.StringIO(newline="")

        write_transactions_csv(
            [make_transaction("expense", "1", "Food", datetime(2024, 1, 1), description="")],
            stream,
        )

        assert stream.getvalue().splitlines()[1].endswith(",N/A")

    def test_quotes_commas(self):
        stream = io.StringIO(newline="")

        write_transactions_csv(
            [
                make_transaction(
                    "expense", "1", "Food, drink", datetime(2024, 1, 1), description="a,b"
                )
            ],
            stream,
        )

        rows = list(csv.reader(io.StringIO(stream.getvalue())))
        assert rows[1][3:] == ["Food, drink", "a,b"]

    def test_no_transactions_writes_header_only(self):
        stream = io.StringIO(newline="")

        assert write_transactions_csv([], stream) == 0
        assert stream.getvalue().strip() == "Date,Amount,Type,Category,Description"


class TestExportTransactions:
    """Tests for export_transactions against the database."""

    def test_exports_only_callers_transactions(self, services, alice, bob):
        for ctx, category in ((alice, "Food"), (bob, "Secret")):
            services.transactions.create(
                ctx,
                {
                    "amount": "10",
                    "type": "expense",
                    "category": category,
                    "date": datetime(2024, 2, 3),
                },
            )
        stream = io.StringIO(newline="")

        count = export_transactions(services, alice, stream)

        assert count == 1
        assert "Secret" not in stream.getvalue()

    def test_export_single_month(self, services, alice):
        for when in (datetime(2024, 1, 31), datetime(2024, 2, 1), datetime(2024, 2, 29)):
            services.transactions.create(
                alice,
                {"amount": "10", "type": "expense", "category": "Food", "date": when},
            )
        stream = io.StringIO(newline="")

        count = export_transactions(services, alice, stream, month=date(2024, 2, 1))

        rows = list(csv.reader(io.StringIO(stream.getvalue())))
        assert count == 2
        assert [row[0] for row in rows[1:]] == ["2024-02-29", "2024-02-01"]
