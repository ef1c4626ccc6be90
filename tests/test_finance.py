from decimal import Decimal

import pytest

from fincli.finance import Percent, Rate, RateFrequency


def test_rate_frequency_values():
    assert [f.value for f in RateFrequency] == ["annual", "monthly", "biweekly", "weekly"]
    assert RateFrequency("monthly") is RateFrequency.MONTHLY


def test_percent_stores_fraction():
    assert Percent(Decimal("20")).value == Decimal("0.2")


@pytest.mark.parametrize("raw", ["20", "3.5", "0", "150"])
def test_percent_round_trip(raw):
    assert Percent(Decimal(raw)).value * 100 == Decimal(raw)


def test_percent_apply_to():
    assert Percent(Decimal("20")).apply_to(Decimal("1000")) == Decimal("200")


def test_percent_str_is_whole_number():
    assert str(Percent(Decimal("20"))) == "20%"


def test_rate_str_has_two_places():
    assert str(Rate(Decimal("6.5"))) == "6.50%"


def test_rate_apply_to_matches_fraction():
    rate = Rate(Decimal("6.5"))
    amount = Decimal("12345.67")
    assert rate.apply_to(amount) == amount * rate.value


def test_rate_equality():
    assert Rate(Decimal("4")) == Rate(Decimal("4.0"))
    assert Rate(Decimal("4")) != Rate(Decimal("5"))
    assert Percent(Decimal("4")) != Rate(Decimal("4"))