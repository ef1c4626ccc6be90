"""Mortgage payments, amortization schedules and extra-payment strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from itertools import count
from typing import Callable, List

from fincli.money import _round

ZERO = Decimal(0)

ExtraPaymentStrategy = Callable[[int, Decimal, Decimal], Decimal]


def calculate_monthly_payment(principal, rate, periods) -> Decimal:
    """Return the fixed payment P * i(1+i)^n / ((1+i)^n - 1)."""
    principal, rate, periods = Decimal(principal), Decimal(rate), Decimal(periods)
    if rate == 0:
        raise ValueError("interest rate must be non-zero")
    growth = (rate + 1) ** periods
    return principal * (rate * growth / (growth - 1))


@dataclass
class Payment:
    """One period of an amortization schedule."""

    period: int
    principal: Decimal
    interest: Decimal
    balance_prior: Decimal
    extra_principal: Decimal = field(default=ZERO, init=False)

    def __post_init__(self) -> None:
        if self.principal > self.balance_prior:
            self.principal = self.balance_prior

    def apply_extra_principal(self, extra) -> None:
        """Set the extra principal, never paying off more than the balance."""
        self.extra_principal = Decimal(extra)
        if self.total_principal > self.balance_prior:
            self.extra_principal = self.balance_prior - self.principal

    @property
    def total_principal(self) -> Decimal:
        return self.principal + self.extra_principal

    @property
    def balance(self) -> Decimal:
        return self.balance_prior - self.total_principal

    @property
    def total(self) -> Decimal:
        return self.total_principal + self.interest


@dataclass
class Schedule:
    """An amortization schedule with running totals."""

    monthly_payment: Decimal
    starting_balance: Decimal
    payments: List[Payment] = field(default_factory=list)
    total_amount: Decimal = ZERO
    total_interest: Decimal = ZERO

    def add_payment(self, payment: Payment) -> None:
        self.payments.append(payment)
        self.total_amount += payment.total
        self.total_interest += payment.interest

    @property
    def num_periods(self) -> int:
        return len(self.payments)

    @property
    def average_monthly_payment(self) -> Decimal:
        if not self.payments:
            raise ZeroDivisionError("schedule has no payments")
        return self.total_amount / self.num_periods


def calculate_schedule(principal, rate, periods, strategy: ExtraPaymentStrategy) -> Schedule:
    """Amortize ``principal`` at periodic ``rate`` until the balance is paid off."""
    principal, rate = Decimal(principal), Decimal(rate)
    balance = principal
    schedule = Schedule(
        monthly_payment=calculate_monthly_payment(principal, rate, periods),
        starting_balance=principal,
    )
    for period in count(1):
        if _round(balance, 2) <= 0:
            break
        interest = balance * rate
        principal_part = schedule.monthly_payment - interest
        payment = Payment(period, principal_part, interest, balance)
        payment.apply_extra_principal(strategy(period, principal_part, interest))
        balance = payment.balance
        schedule.add_payment(payment)
    return schedule


def extra_monthly_and_annual_payment(monthly, annual) -> ExtraPaymentStrategy:
    """Pay ``monthly`` extra every period plus ``annual`` every twelfth period."""
    monthly, annual = Decimal(monthly), Decimal(annual)

    def strategy(period: int, principal: Decimal, interest: Decimal) -> Decimal:
        return monthly + annual if period % 12 == 0 else monthly

    return strategy


def no_extra_payment() -> ExtraPaymentStrategy:
    """Never pay extra."""
    return extra_monthly_and_annual_payment(ZERO, ZERO)


def extra_monthly_payment(amount) -> ExtraPaymentStrategy:
    """Pay ``amount`` extra every period."""
    return extra_monthly_and_annual_payment(amount, ZERO)


def extra_annual_payment(amount) -> ExtraPaymentStrategy:
    """Pay ``amount`` extra every twelfth period."""
    return extra_monthly_and_annual_payment(ZERO, amount)