"""Command-line interface for International Business."""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from international_business import __version__
from international_business.config import get_settings
from international_business.container import Container
from international_business.domain.money import REPORTING_CURRENCY
from international_business.exceptions import InternationalBusinessError
from international_business.logging_config import configure_logging


def build_container(args: argparse.Namespace) -> Container:
    """Create a container honouring the --rates/--transactions overrides."""
    settings = get_settings()
    overrides: dict[str, Path] = {}
    if args.rates:
        overrides["rates_file"] = Path(args.rates)
    if args.transactions:
        overrides["transactions_file"] = Path(args.transactions)
    if overrides:
        settings = settings.model_copy(update=overrides)
    return Container(settings)


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"International Business v{__version__}")
    return 0


def cmd_transactions(args: argparse.Namespace) -> int:
    """List every transaction in its original currency."""
    try:
        transactions = build_container(args).transaction_aggregator.all_transactions()
    except InternationalBusinessError as e:
        print(f"Error: {e.message}")
        return 1

    if not transactions:
        print("No transactions loaded")
        return 0

    print(f"Transactions ({len(transactions)}):")
    print("-" * 40)
    for transaction in transactions:
        print(f"  {transaction.sku}: {transaction.amount} {transaction.currency}")
    return 0


def cmd_rates(args: argparse.Namespace) -> int:
    """List every exchange rate."""
    try:
        rates = build_container(args).rate_graph.rates
    except InternationalBusinessError as e:
        print(f"Error: {e.message}")
        return 1

    if not rates:
        print("No rates loaded")
        return 0

    print(f"Exchange rates ({len(rates)}):")
    print("-" * 40)
    for rate in rates:
        print(f"  {rate.pair}: {rate.rate}")
    return 0


def cmd_sku(args: argparse.Namespace) -> int:
    """Show a SKU's transactions in EUR and their total."""
    try:
        aggregator = build_container(args).transaction_aggregator
        transactions = aggregator.transactions_by_sku(args.sku)
        if not transactions:
            print(f"No transactions found for SKU: {args.sku}")
            return 1
        total = aggregator.total_in_eur_by_sku(args.sku)
    except InternationalBusinessError as e:
        print(f"Error: {e.message}")
        return 1

    print(f"Transactions for SKU {args.sku} ({len(transactions)}):")
    print("-" * 40)
    for transaction in transactions:
        print(f"  {transaction.amount} {transaction.currency}")
    print("-" * 40)
    print(f"Total: {total} {REPORTING_CURRENCY}")
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert an amount to EUR."""
    try:
        amount = Decimal(args.amount)
    except InvalidOperation:
        amount = None
    if amount is None or not amount.is_finite():
        print(f"Error: Invalid amount: {args.amount}")
        return 1

    try:
        converted = build_container(args).rate_graph.convert(amount, args.currency)
    except InternationalBusinessError as e:
        print(f"Error: {e.message}")
        return 1

    print(f"{args.amount} {args.currency} = {converted} {REPORTING_CURRENCY}")
    return 0


def cmd_find_rate(args: argparse.Namespace) -> int:
    """Resolve the factor between two currencies."""
    try:
        factor = build_container(args).rate_graph.find_rate(
            args.from_currency, args.to_currency
        )
    except InternationalBusinessError as e:
        print(f"Error: {e.message}")
        return 1

    print(f"1 {args.from_currency} = {factor} {args.to_currency}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="international-business",
        description="International Business - per-SKU sales totals in EUR",
    )
    parser.add_argument(
        "--rates",
        "-r",
        help="Path to the rates JSON file",
        default=None,
    )
    parser.add_argument(
        "--transactions",
        "-t",
        help="Path to the transactions JSON file",
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    transactions_parser = subparsers.add_parser(
        "transactions", help="List all transactions"
    )
    transactions_parser.set_defaults(func=cmd_transactions)

    rates_parser = subparsers.add_parser("rates", help="List all exchange rates")
    rates_parser.set_defaults(func=cmd_rates)

    sku_parser = subparsers.add_parser(
        "sku", help="Show a SKU's transactions converted to EUR"
    )
    sku_parser.add_argument("sku", help="SKU to aggregate")
    sku_parser.set_defaults(func=cmd_sku)

    convert_parser = subparsers.add_parser("convert", help="Convert an amount to EUR")
    convert_parser.add_argument("amount", help="Amount to convert")
    convert_parser.add_argument("currency", help="Currency code of the amount")
    convert_parser.set_defaults(func=cmd_convert)

    find_rate_parser = subparsers.add_parser(
        "find-rate", help="Resolve the conversion factor between two currencies"
    )
    find_rate_parser.add_argument("from_currency", help="Source currency code")
    find_rate_parser.add_argument("to_currency", help="Target currency code")
    find_rate_parser.set_defaults(func=cmd_find_rate)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(get_settings())

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
