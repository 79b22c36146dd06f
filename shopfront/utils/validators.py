from decimal import Decimal


def require_positive_number(v: int | Decimal, name: str = "value") -> None:
    if v <= 0:
        raise ValueError(f"{name} must be > 0")


def require_int(v: int, name: str = "value") -> None:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"{name} must be an integer")


def to_decimal(v: int | float | str | Decimal) -> Decimal:
    # str() first so 0.2 becomes Decimal("0.2") and not its binary expansion
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))
