#!/usr/bin/env python3

from cli.common import print_json
from logger import get_logger
from models.currency import CURRENCIES

logger = get_logger()


def cmd_list(args, services):
    """List supported display currencies."""
    if args.json:
        print_json([{"code": c.code, "symbol": c.symbol} for c in CURRENCIES])
        return

    for currency in CURRENCIES:
        marker = " (configured)" if currency.code == services.config.currency else ""
        logger.info(f"{currency.code}  {currency.symbol}{marker}")


def setup_parser(subparsers):
    parser = subparsers.add_parser(
        "currencies",
        help="Supported currencies",
        description="List display currencies (no conversion is performed)",
    )
    currencies_subparsers = parser.add_subparsers(
        title="subcommands", dest="subcommand", required=True
    )
    list_parser = currencies_subparsers.add_parser("list", help="List currencies")
    list_parser.add_argument("--json", action="store_true", help="Print JSON output")
    list_parser.set_defaults(func=cmd_list)
