"""Command line interface for the fee simulator.

Example
-------
Quote a transfer and compare every bank::

    python -m feesim quote --amount 2500 --bank "Adriatic Commercial Bank"
    python -m feesim compare --amount 2500 --out fees.csv --chart fees.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .charts import plot_fee_comparison
from .config import SimulatorConfig, load_config
from .data_load import load_store
from .export import format_eur, to_csv
from .monitor import Timer
from .schemas import FeeResult
from .sepa import CHANNELS
from .settlement import settlement_options
from .simulator import compare_banks, parse_amount, quote
from .store import CLIENT_TYPES, BankRuleStore

EXIT_NOT_FOUND = 1
EXIT_DATA_ERROR = 2


def _load(args: argparse.Namespace) -> tuple[SimulatorConfig, BankRuleStore]:
    config = load_config(args.config)
    if args.individual:
        config.datasets["individual"] = Path(args.individual)
    if args.business:
        config.datasets["business"] = Path(args.business)
    with Timer("load datasets") as timer:
        store = load_store(config.datasets)
        timer.note = repr(store)
    return config, store


def _fee_line(label: str, result: Optional[FeeResult]) -> str:
    if result is None:
        return f"{label:<12} no rules defined"
    return f"{label:<12} fee {format_eur(result.sender_fee):>12}   total {format_eur(result.sender_pays_total):>14}"


def _cmd_banks(args: argparse.Namespace, config: SimulatorConfig, store: BankRuleStore) -> int:
    client_type = args.client_type or config.default_client_type
    for profile in store.list_banks(client_type):
        options = settlement_options(profile, not args.non_resident)
        suffix = f"  [{', '.join(options)}]" if options else ""
        print(f"{profile.name}{suffix}")
    return 0


def _cmd_quote(args: argparse.Namespace, config: SimulatorConfig, store: BankRuleStore) -> int:
    client_type = args.client_type or config.default_client_type
    result = quote(
        store,
        parse_amount(args.amount),
        args.bank,
        client_type=client_type,
        resident=not args.non_resident,
        channel=args.channel or config.default_channel,
        first_of_day=not args.not_first,
        settlement=args.settlement,
    )
    if result is None:
        logging.error("Unknown bank %r for %s clients", args.bank, client_type)
        return EXIT_NOT_FOUND

    print(f"{result.bank} ({client_type}, {'resident' if result.resident else 'non-resident'})")
    print(f"Amount       {format_eur(result.amount)}")
    print(_fee_line("SWIFT SHA", result.sha) + f"   settlement {result.settlement}")
    print(_fee_line("SEPA", result.sepa) + f"   channel {result.channel}")
    print(_fee_line("OUR (info)", result.our))
    print(_fee_line("BEN (info)", result.ben))
    return 0


def _cmd_compare(args: argparse.Namespace, config: SimulatorConfig, store: BankRuleStore) -> int:
    client_type = args.client_type or config.default_client_type
    with Timer("compare banks") as timer:
        df = compare_banks(
            store,
            parse_amount(args.amount),
            client_type=client_type,
            resident=not args.non_resident,
            settlement=args.settlement,
        )
        timer.note = f"{len(df)} {client_type} banks"
    print(df.to_string(index=False, float_format=lambda v: f"{v:.2f}", na_rep="-"))
    if args.out:
        to_csv(df, args.out)
        logging.info("Comparison written to %s", args.out)
    if args.chart:
        plot_fee_comparison(df, args.chart)
        logging.info("Chart written to %s", args.chart)
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="feesim", description="Estimate SEPA and SWIFT transfer fees")
    parser.add_argument("--config", help="YAML config with dataset paths")
    parser.add_argument("--individual", help="individual client bank profiles JSON path")
    parser.add_argument("--business", help="business client bank profiles JSON path")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--client-type", choices=CLIENT_TYPES, help="client category")
    common.add_argument("--non-resident", action="store_true", help="price as a non-resident client")

    sub = parser.add_subparsers(dest="command")

    banks_p = sub.add_parser("banks", parents=[common], help="list banks and settlement options")
    banks_p.set_defaults(func=_cmd_banks)

    quote_p = sub.add_parser("quote", parents=[common], help="quote one transfer")
    quote_p.add_argument("--amount", required=True, help="amount in EUR, comma or dot decimals")
    quote_p.add_argument("--bank", required=True, help="bank name as listed by 'banks'")
    quote_p.add_argument("--channel", choices=CHANNELS, help="SEPA channel")
    quote_p.add_argument("--not-first", action="store_true", help="not the first transfer of the day")
    quote_p.add_argument("--settlement", help="SHA settlement speed, e.g. T+0 or Standard")
    quote_p.set_defaults(func=_cmd_quote)

    compare_p = sub.add_parser("compare", parents=[common], help="compare SWIFT fees of all banks")
    compare_p.add_argument("--amount", required=True, help="amount in EUR")
    compare_p.add_argument("--settlement", help="SHA settlement speed")
    compare_p.add_argument("--out", help="write comparison CSV")
    compare_p.add_argument("--chart", help="write comparison bar chart PNG")
    compare_p.set_defaults(func=_cmd_compare)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config, store = _load(args)
    except (OSError, ValueError) as e:
        logging.error("Could not load bank data: %s", e)
        sys.exit(EXIT_DATA_ERROR)

    sys.exit(args.func(args, config, store))


if __name__ == "__main__":
    main()
