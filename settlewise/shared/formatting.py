from decimal import Decimal
from typing import Optional, Union

from settlewise.config import settings
from settlewise.shared.types import round_whole


def format_currency(amount: Union[Decimal, int, float], symbol: Optional[str] = None) -> str:
    """Format a monetary amount in whole units with thousands separators, e.g. HK$2,463,750."""
    if symbol is None:
        symbol = settings.CURRENCY_SYMBOL
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    whole = round_whole(amount)
    if whole == 0:
        whole = abs(whole)
    elif whole < 0:
        return f"-{symbol}{-whole:,.0f}"
    return f"{symbol}{whole:,.0f}"


def format_percent(value: Decimal) -> str:
    """Render a percentage without trailing zeros: Decimal('30.0') -> '30%'."""
    return f"{value.normalize():f}%"
