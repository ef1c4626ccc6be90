from decimal import Decimal

import pytest

from fincli.money import format_money, string_fixed
from fincli.mortgage import calculate_schedule
from fincli.realestate import (
    PurchaseOptions,
    annual_schedule_lines,
    extra_payment_strategy,
    monthly_schedule_lines,
    mortgage_summary_lines,
    purchase_report_lines,
)


def _schedule(extra_monthly=0, extra_annual=0, years=30):
    strategy = extra_payment_strategy(Decimal(extra_monthly), Decimal(extra_annual))
    return calculate_schedule(
        Decimal(200000), Decimal(6) / 100 / 12, Decimal(years) * 12, strategy
    )


def test_strategy_none():
    strategy = extra_payment_strategy(Decimal(0), Decimal(0))
    assert strategy(12, Decimal(1), Decimal(1)) == 0


def test_strategy_monthly_only():
    strategy = extra_payment_strategy(Decimal(100), Decimal(0))
    assert strategy(1, Decimal(1), Decimal(1)) == Decimal(100)
    assert strategy(12, Decimal(1), Decimal(1)) == Decimal(100)


def test_strategy_annual_only():
    strategy = extra_payment_strategy(Decimal(0), Decimal(500))
    assert strategy(1, Decimal(1), Decimal(1)) == 0
    assert strategy(12, Decimal(1), Decimal(1)) == Decimal(500)


def test_strategy_both():
    strategy = extra_payment_strategy(Decimal(100), Decimal(500))
    assert strategy(1, Decimal(1), Decimal(1)) == Decimal(100)
    assert strategy(24, Decimal(1), Decimal(1)) == Decimal(600)


def test_summary_without_extra():
    schedule = _schedule()
    lines = mortgage_summary_lines(schedule)
    assert lines[0] == "Monthly Payment: $" + string_fixed(schedule.monthly_payment, 2)
    assert not any(line.startswith("Average Monthly Payment") for line in lines)
    assert "Pay off in 30 years and 0 month(s)" in lines
    assert lines[-1] == ""


def test_summary_with_extra_shows_average():
    schedule = _schedule(extra_monthly=500)
    lines = mortgage_summary_lines(schedule)
    assert schedule.num_periods < 360
    assert any(line.startswith("Average Monthly Payment: $") for line in lines)
    assert f"Total Interest Paid: ${string_fixed(schedule.total_interest, 2)}" in lines


def test_monthly_schedule_lines():
    schedule = _schedule(years=10)
    lines = monthly_schedule_lines(schedule)
    assert lines[0].startswith("Month")
    assert lines[1] == "-" * 89
    year_markers = [line for line in lines if "End of Year" in line]
    assert len(year_markers) == schedule.num_periods // 12
    assert len(lines) == 2 + schedule.num_periods + len(year_markers)
    assert year_markers[-1] == f"\t--- End of Year {schedule.num_periods // 12} ---"


def test_annual_schedule_lines():
    schedule = _schedule(years=10)
    lines = annual_schedule_lines(schedule)
    assert lines[0].startswith("Year")
    assert len(lines) == 2 + schedule.num_periods // 12
    assert lines[-1].rstrip().endswith("$0.00")
    assert lines[2].startswith("1      $")


def test_purchase_options_invariants():
    options = PurchaseOptions(price=Decimal(350000), rate=Decimal(7))
    assert options.down_payment() + options.loan_amount() == options.price
    small = PurchaseOptions(price=Decimal(100), rate=Decimal(7))
    assert small.closing_costs() == small.closing_percent


def test_purchase_report_basic():
    options = PurchaseOptions(price=Decimal(350000), rate=Decimal(7))
    lines = purchase_report_lines(options)
    assert lines[0] == "Home Price:  " + format_money(options.price)
    assert lines[1] == "Down Payment (20): " + format_money(options.down_payment())
    assert "--- One-Time costs ---" in lines
    assert not any(line.startswith("HOA") for line in lines)
    assert not any(line.startswith("PMI") for line in lines)
    assert lines[-1].startswith("TOTAL MONTHLY: $")


def test_purchase_report_hoa_and_pmi():
    options = PurchaseOptions(
        price=Decimal(350000), rate=Decimal(7), monthly_hoa=Decimal(250), pmi_rate=Decimal("0.005")
    )
    lines = purchase_report_lines(options)
    assert f"HOA:  {format_money(Decimal(250))}" in lines
    assert any(line.startswith("PMI:  $") for line in lines)


def test_purchase_zero_rate_raises():
    with pytest.raises(ValueError):
        purchase_report_lines(PurchaseOptions(price=Decimal(1000), rate=Decimal(0)))