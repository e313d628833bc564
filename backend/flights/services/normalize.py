import re
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
UTC_SUFFIX_RE = re.compile(r"[Zz]$")


def to_decimal(value) -> Decimal:
    """Convert a JSON number (or numeric string) into a Decimal without float noise."""
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"Not a monetary amount: {value!r}")
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a monetary amount: {value!r}") from exc

    if not amount.is_finite():
        raise ValueError(f"Not a monetary amount: {value!r}")
    return amount


def round_fare(amount: Decimal) -> Decimal:
    # Half-up on the cent boundary: 0.125 -> 0.13, never banker's rounding.
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def discounted_fare(base_price, tax, discount_percent) -> Decimal:
    """Apply the discount to base price plus tax, then round once."""
    gross = to_decimal(base_price) + to_decimal(tax)
    multiplier = Decimal(1) - to_decimal(discount_percent) / Decimal(100)
    return round_fare(gross * multiplier)


def parse_timestamp(value) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Values without zone information are taken to be UTC already.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        raw = UTC_SUFFIX_RE.sub("+00:00", value.strip())
        parsed = datetime.fromisoformat(raw)
    else:
        raise ValueError(f"Not a timestamp: {value!r}")

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
