"""Display formatting for currency and rates"""

from decimal import Decimal, ROUND_HALF_UP


def format_currency(amount: float) -> str:
    """Whole dollars with thousands separators, half-up: 1234.56 -> "$1,235" """
    dollars = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,}"


def format_percentage(rate: float) -> str:
    """Two decimal places with a percent sign: 10 -> "10.00%" """
    return f"{rate:.2f}%"
