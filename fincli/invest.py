"""Investment calculators: FIRE number and portfolio rebalancing."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Sequence

from fincli.money import parse_decimal, string_fixed

_SLICE_FORMAT_ERROR = "invalid format for slice. Expected format: 'NAME:ALLOCATION'"
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT8_MIN, _INT8_MAX = -128, 127


def fire_number(annual_expenses, safe_withdrawal_rate) -> Decimal:
    """Return the savings needed to cover expenses at the given withdrawal rate (percent)."""
    return Decimal(annual_expenses) / (Decimal(safe_withdrawal_rate) / 100)


@dataclass(frozen=True)
class Slice:
    """A named share of a portfolio, in whole percent."""

    name: str
    allocation: int


def parse_slice(text: str) -> Slice:
    """Parse a ``NAME:ALLOCATION`` specification."""
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError(_SLICE_FORMAT_ERROR)
    name, raw_allocation = parts
    if not _INTEGER.fullmatch(raw_allocation):
        raise ValueError(_SLICE_FORMAT_ERROR)
    allocation = int(raw_allocation)
    if not _INT8_MIN <= allocation <= _INT8_MAX:
        raise ValueError(_SLICE_FORMAT_ERROR)
    return Slice(name, allocation)


def parse_slices(raw_slices: Iterable[str]) -> List[Slice]:
    """Parse slice specifications, rejecting a total allocation above 100."""
    slices = [parse_slice(text) for text in raw_slices]
    if sum(s.allocation for s in slices) > 100:
        raise ValueError("total allocation cannot be greater than 100")
    return slices


def rebalance_lines(slices: Sequence[Slice], totals: Iterable[float]) -> List[str]:
    """Return the table of target amounts for each slice."""
    total = sum(totals, 0.0)
    lines = [f"{'Slice':<6} {'Amount':<12}", "-" * 21]
    for s in slices:
        amount = total * float(s.allocation) / 100
        lines.append(f"{s.name:<6} ${amount:<12,.0f}")
    return lines


def _decimal(text: str) -> Decimal:
    try:
        return parse_decimal(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _float_list(text: str) -> List[float]:
    try:
        return [float(part) for part in text.split(",")]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid float list: {text!r}") from exc


def _run_fire_number(args: argparse.Namespace) -> None:
    number = fire_number(args.expenses, args.swr)
    print(f"FIRE Number: ${string_fixed(number, 2)}")


def _run_rebalance(args: argparse.Namespace) -> None:
    slices = parse_slices(args.slice or [])
    print("\n".join(rebalance_lines(slices, args.total or [])))


def register_commands(subparsers) -> argparse.ArgumentParser:
    """Add the ``invest`` command group to ``subparsers``."""
    invest = subparsers.add_parser(
        "invest", help="Investment calculators.", description="Investment calculators."
    )
    invest.set_defaults(handler=lambda args: invest.print_help())
    commands = invest.add_subparsers(title="commands", metavar="COMMAND")

    fire = commands.add_parser(
        "fire-number",
        help="Calculate your FIRE number.",
        description="Calculate your FIRE number.",
    )
    fire.add_argument("-e", "--expenses", type=_decimal, required=True, help="Annual expenses.")
    fire.add_argument("--swr", type=_decimal, default=Decimal(4), help="Safe withdrawl rate.")
    fire.set_defaults(handler=_run_fire_number)

    rebalance = commands.add_parser(
        "rebalance", help="Rebalance portfolio.", description="Rebalance portfolio."
    )
    rebalance.add_argument(
        "-s", "--slice", action="append", default=None, help="Format: Name:Allocation"
    )
    rebalance.add_argument(
        "-t",
        "--total",
        type=_float_list,
        action="extend",
        default=None,
        help="Total portfolio amount.",
    )
    rebalance.set_defaults(handler=_run_rebalance)
    return invest