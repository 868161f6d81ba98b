from utils.constants import CURRENCY_SYMBOL


def format_currency(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format a float as currency string, e.g. 'KSh 1,234.56'."""
    return f"{symbol}{amount:,.2f}"


def format_whole_currency(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Rounded to whole shillings for dashboard cards, e.g. 'KSh 1,235'."""
    return f"{symbol}{amount:,.0f}"


def format_percentage(value: float) -> str:
    return f"{abs(value):.1f}%"
