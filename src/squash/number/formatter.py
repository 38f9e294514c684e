"""Number display helpers."""
from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal


class Formatter:
    def format(self, number: float) -> str:
        """Thousands-separated rendering; integral values drop the fraction."""
        if float(number).is_integer():
            return f"{int(number):,}"
        return f"{number:,}"

    def round(self, number: float, decimals: int = 0) -> str:
        """Round half away from zero and render exactly `decimals` fraction digits."""
        if decimals < 0:
            raise ValueError("decimals must be >= 0")
        exponent = Decimal(1).scaleb(-decimals)
        return str(Decimal(str(number)).quantize(exponent, rounding=ROUND_HALF_UP))
