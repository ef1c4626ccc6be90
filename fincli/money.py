"""Decimal parsing and money formatting helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

_CENT = Decimal("0.01")


def parse_decimal(text: str) -> Decimal:
    """Parse a decimal number, allowing underscores as digit separators."""
    cleaned = text.replace("_", "")
    if not cleaned or cleaned != cleaned.strip():
        raise ValueError(f"can't convert {text} to decimal")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise ValueError(f"can't convert {text} to decimal") from exc
    if not value.is_finite():
        raise ValueError(f"can't convert {text} to decimal")
    return value


def _round(value: Decimal, places: int) -> Decimal:
    """Round half away from zero to ``places`` decimal places."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 3)
        rounded = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        if rounded == 0:
            rounded = abs(rounded)
    return rounded


def string_fixed(value, places: int) -> str:
    """Format ``value`` rounded to exactly ``places`` decimal places."""
    rounded = _round(Decimal(value), places)
    return f"{rounded:.{max(places, 0)}f}"


def to_money(value) -> str:
    """Format a decimal amount as dollars with thousands separators."""
    whole, cents = string_fixed(value, 2).split(".")
    sign = "-" if whole.startswith("-") else ""
    digits = int(whole.lstrip("-"))
    return f"${sign}{digits:,}.{cents}"


def format_money(value) -> str:
    """Round to cents and format as dollars with thousands separators."""
    rounded = _round(Decimal(value), 2)
    return f"${float(rounded):,.2f}"