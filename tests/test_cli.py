"""Tests for CLI argument helpers and transaction commands."""

import argparse
import json
from datetime import date
from decimal import Decimal

import pytest

from cli.common import format_amount, month_arg
from cli.transactions import cmd_export, cmd_list, setup_parser
from context import RequestContext
from errors import NotAuthenticated


class TestMonthArg:
    """Tests for the YYYY-MM argparse type."""

    def test_parses_month(self):
        assert month_arg("2024-02") == date(2024, 2, 1)

    @pytest.mark.parametrize("value", ["2024", "2024-13", "2024/02", "feb"])
    def test_rejects_bad_month(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            month_arg(value)


class TestFormatAmount:
    """Tests for currency formatting."""

    def test_uses_configured_symbol(self, test_config):
        test_config.currency = "GBP"

        assert format_amount(Decimal("1234.5"), test_config) == "£1,234.50"

    def test_negative_amount(self, test_config):
        assert format_amount(Decimal("-3"), test_config) == "$-3.00"


class TestTransactionCommands:
    """Tests for the transactions subcommands against the database."""

    def test_list_filters_by_category(self, services, alice, capsys):
        services.transactions.create(
            alice, {"amount": "10", "type": "expense", "category": "Food"}
        )
        services.transactions.create(
            alice, {"amount": "20", "type": "expense", "category": "Rent"}
        )
        args = argparse.Namespace(month=None, category="Food", json=True)

        cmd_list(args, services, alice)

        listed = json.loads(capsys.readouterr().out)
        assert [t["category"] for t in listed] == ["Food"]

    def test_list_parser_accepts_category(self):
        parser = argparse.ArgumentParser()
        setup_parser(parser.add_subparsers(dest="command"))

        args = parser.parse_args(["transactions", "list", "--category", "Food"])

        assert args.category == "Food"
        assert args.month is None

    def test_export_without_user_leaves_no_file(self, services, tmp_path):
        output = tmp_path / "out" / "export.csv"
        args = argparse.Namespace(output=str(output), month=None)

        with pytest.raises(NotAuthenticated):
            cmd_export(args, services, RequestContext(user_id=None))

        assert not output.exists()

    def test_export_writes_file(self, services, alice, tmp_path):
        services.transactions.create(
            alice, {"amount": "10", "type": "expense", "category": "Food"}
        )
        output = tmp_path / "export.csv"

        cmd_export(argparse.Namespace(output=str(output), month=None), services, alice)

        lines = output.read_text().splitlines()
        assert lines[0] == "Date,Amount,Type,Category,Description"
        assert len(lines) == 2
