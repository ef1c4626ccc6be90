"""Real estate calculators: mortgage schedules and home purchase costs."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from fincli.money import _round, format_money, parse_decimal, string_fixed
from fincli.mortgage import (
    ExtraPaymentStrategy,
    Schedule,
    calculate_monthly_payment,
    calculate_schedule,
    extra_annual_payment,
    extra_monthly_and_annual_payment,
    extra_monthly_payment,
    no_extra_payment,
)

_ZERO = Decimal(0)
_TWELVE = Decimal(12)
_HUNDRED = Decimal(100)
_COLUMNS = ("Principal", "Extra Principal", "Total Principal", "Interest", "Total", "Balance")


def extra_payment_strategy(extra_monthly, extra_annual) -> ExtraPaymentStrategy:
    """Pick the strategy matching whichever extra payments are positive."""
    monthly, annual = Decimal(extra_monthly), Decimal(extra_annual)
    if monthly > 0 and annual > 0:
        return extra_monthly_and_annual_payment(monthly, annual)
    if monthly > 0:
        return extra_monthly_payment(monthly)
    if annual > 0:
        return extra_annual_payment(annual)
    return no_extra_payment()


def mortgage_summary_lines(schedule: Schedule) -> List[str]:
    """Return the summary of a mortgage schedule, ending with a blank line."""
    lines = [f"Monthly Payment: ${string_fixed(schedule.monthly_payment, 2)}"]
    average = schedule.average_monthly_payment
    if _round(schedule.monthly_payment, 2) != _round(average, 2):
        lines.append(f"Average Monthly Payment: ${string_fixed(average, 2)}")
    periods = schedule.num_periods
    years = string_fixed(Decimal(periods) / _TWELVE, 0)
    lines += [
        f"Total Amount Paid: ${string_fixed(schedule.total_amount, 2)}",
        f"Total Interest Paid: ${string_fixed(schedule.total_interest, 2)}",
        f"Pay off in {years} years and {periods % 12} month(s)",
        "",
    ]
    return lines


def _header(first: str) -> List[str]:
    return [f"{first:<6} " + " ".join(f"{name:<12}" for name in _COLUMNS), "-" * 89]


def _row(label: int, principal, extra, total_principal, interest, total, balance) -> str:
    return (
        f"{label:<6d} ${string_fixed(principal, 2):<11} ${string_fixed(extra, 2):<14} "
        f"${string_fixed(total_principal, 2):<14} ${string_fixed(interest, 2):<11} "
        f"${string_fixed(total, 2):<12} ${string_fixed(balance, 2):<11}"
    )


def monthly_schedule_lines(schedule: Schedule) -> List[str]:
    """Return the month-by-month amortization table."""
    lines = _header("Month")
    for p in schedule.payments:
        lines.append(
            _row(p.period, p.principal, p.extra_principal, p.total_principal,
                 p.interest, p.total, p.balance)
        )
        if p.period % 12 == 0:
            lines.append(f"\t--- End of Year {p.period // 12} ---")
    return lines


def annual_schedule_lines(schedule: Schedule) -> List[str]:
    """Return the year-by-year amortization table; a trailing partial year is omitted."""
    lines = _header("Year")
    sums = [_ZERO] * 5
    for p in schedule.payments:
        amounts = (p.principal, p.extra_principal, p.total_principal, p.interest, p.total)
        sums = [acc + value for acc, value in zip(sums, amounts)]
        if p.period % 12 == 0:
            lines.append(_row(p.period // 12, *sums, p.balance))
            sums = [_ZERO] * 5
    return lines


def _plain(value: Decimal) -> str:
    return f"{Decimal(value).normalize():f}"


@dataclass
class PurchaseOptions:
    """Inputs for the cost of buying a home; percentages are given in percent."""

    price: Decimal
    rate: Decimal
    down_payment_percent: Decimal = Decimal(20)
    years: Decimal = Decimal(30)
    closing_percent: Decimal = Decimal(3)
    escrow: Decimal = _ZERO
    annual_tax: Decimal = _ZERO
    annual_insurance: Decimal = _ZERO
    pmi_rate: Decimal = _ZERO
    monthly_hoa: Decimal = _ZERO

    def down_payment(self) -> Decimal:
        return Decimal(self.price) * (Decimal(self.down_payment_percent) / _HUNDRED)

    def loan_amount(self) -> Decimal:
        return Decimal(self.price) - self.down_payment()

    def closing_costs(self) -> Decimal:
        return Decimal(self.price) * (Decimal(self.closing_percent) / _HUNDRED)


def purchase_report_lines(options: PurchaseOptions) -> List[str]:
    """Return the report of upfront and monthly costs of a purchase."""
    down = options.down_payment()
    closing = options.closing_costs()
    escrow = Decimal(options.escrow)
    lines = [
        f"Home Price:  {format_money(options.price)}",
        f"Down Payment ({_plain(options.down_payment_percent)}): {format_money(down)}",
        f"Loan Amount:  {format_money(options.loan_amount())}",
        "",
        "--- One-Time costs ---",
        f"Closing Costs ({_plain(options.closing_percent)}): {format_money(closing)}",
        f"Escrow Prepaids:  {format_money(escrow)}",
        f"TOTAL UPFRONT:  {format_money(down + closing + escrow)}",
        "",
        "--- Monthly Costs ---",
    ]
    monthly_rate = Decimal(options.rate) / _TWELVE / _HUNDRED
    periods = Decimal(options.years) * _TWELVE
    mortgage = calculate_monthly_payment(options.loan_amount(), monthly_rate, periods)
    taxes = Decimal(options.annual_tax) / _TWELVE
    insurance = Decimal(options.annual_insurance) / _TWELVE
    hoa = Decimal(options.monthly_hoa)
    pmi = options.loan_amount() * Decimal(options.pmi_rate) / _TWELVE

    lines += [
        f"Mortgage Payment:  {format_money(mortgage)}",
        f"Property Tax:  {format_money(taxes)}",
        f"Home Insurance:  {format_money(insurance)}",
    ]
    if hoa > 0:
        lines.append(f"HOA:  {format_money(hoa)}")
    if pmi > 0:
        lines.append(f"PMI:  {format_money(pmi)}")
    total = mortgage + taxes + insurance + hoa + pmi
    lines.append(f"TOTAL MONTHLY: {format_money(total):<12}")
    return lines


def _decimal(text: str) -> Decimal:
    try:
        return parse_decimal(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _run_mortgage(args: argparse.Namespace) -> None:
    monthly_rate = args.rate / _HUNDRED / _TWELVE
    periods = args.years * _TWELVE
    strategy = extra_payment_strategy(args.extra_monthly, args.extra_annual)
    schedule = calculate_schedule(args.amount, monthly_rate, periods, strategy)
    lines = mortgage_summary_lines(schedule)
    if args.monthly_schedule:
        lines += monthly_schedule_lines(schedule)
    elif args.annual_schedule:
        lines += annual_schedule_lines(schedule)
    print("\n".join(lines))


def _run_purchase(args: argparse.Namespace) -> None:
    options = PurchaseOptions(
        price=args.price,
        rate=args.rate,
        down_payment_percent=args.down,
        years=args.years,
        closing_percent=args.closing_percent,
        escrow=args.escrows,
        annual_tax=args.taxes,
        annual_insurance=args.insurance,
        pmi_rate=args.pmi,
        monthly_hoa=args.hoa,
    )
    print("\n".join(purchase_report_lines(options)))


def register_commands(subparsers) -> argparse.ArgumentParser:
    """Add the ``real-estate`` command group to ``subparsers``."""
    group = subparsers.add_parser(
        "real-estate", help="Real estate calculation.", description="Real estate calculation."
    )
    group.set_defaults(handler=lambda args: group.print_help())
    commands = group.add_subparsers(title="commands", metavar="COMMAND")

    purchase = commands.add_parser(
        "purchase",
        help="Calculate the costs of purchasing a home.",
        description="Calculate the costs of purchasing a home.",
    )
    purchase.add_argument("-p", "--price", type=_decimal, required=True, help="Home price")
    purchase.add_argument("-d", "--down", type=_decimal, default=Decimal(20),
                          help="Down payment percent")
    purchase.add_argument("-r", "--rate", type=_decimal, required=True,
                          help="Mortgage interest rate")
    purchase.add_argument("-y", "--years", type=_decimal, default=Decimal(30),
                          help="Mortgage term in years")
    purchase.add_argument("--closing-percent", type=_decimal, default=Decimal(3),
                          help="Estimated closing costs as a percent")
    purchase.add_argument("--escrows", type=_decimal, default=_ZERO,
                          help="Estimate of prepaid escrow costs")
    purchase.add_argument("-t", "--taxes", type=_decimal, default=_ZERO,
                          help="Annual property taxes")
    purchase.add_argument("-i", "--insurance", type=_decimal, default=_ZERO,
                          help="Annual homeowners insurance")
    purchase.add_argument("--pmi", type=_decimal, default=_ZERO, help="PMI rate")
    purchase.add_argument("--hoa", type=_decimal, default=_ZERO, help="Monthly HOA fee")
    purchase.set_defaults(handler=_run_purchase)

    mortgage = commands.add_parser(
        "mortgage", help="Calculate mortgage costs.", description="Calculate mortgage costs."
    )
    mortgage.add_argument("-a", "--amount", type=_decimal, required=True,
                          help="The loan amount borrowed.")
    mortgage.add_argument("-r", "--rate", type=_decimal, required=True,
                          help="Annual interest rate.")
    mortgage.add_argument("-y", "--years", type=_decimal, default=Decimal(30),
                          help="Loan term in years")
    mortgage.add_argument("--extra-monthly", type=_decimal, default=_ZERO,
                          help="Extra monthly payment.")
    mortgage.add_argument("--extra-annual", type=_decimal, default=_ZERO,
                          help="Extra annual payment.")
    schedules = mortgage.add_mutually_exclusive_group()
    schedules.add_argument("--monthly-schedule", action="store_true",
                           help="Print the monthly amortization schedule.")
    schedules.add_argument("--annual-schedule", action="store_true",
                           help="Print the annual amortization schedule.")
    mortgage.set_defaults(handler=_run_mortgage)
    return group