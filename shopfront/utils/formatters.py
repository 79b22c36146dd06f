from decimal import Decimal

from shopfront.config import settings


def money(v: Decimal) -> str:
    return f"{v:.{settings.decimals}f}"


def truncate(v: Decimal) -> int:
    # int() drops the fraction toward zero, which is what the receipt shows
    return int(v)


def plain_number(v: Decimal) -> str:
    """
    Plain decimal notation with at least one fractional digit:
    200 -> "200.0", 1.10 -> "1.1", 539.5 -> "539.5".
    """
    d = Decimal(v).normalize()
    if d == d.to_integral_value():
        return f"{d.quantize(Decimal(1)):f}.0"
    return f"{d:f}"
