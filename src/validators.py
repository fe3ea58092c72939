"""
Console Input Parsing for the Deribit Trading Client.

These helpers convert raw console text into the types the client needs.
They check type only: ranges and instrument names are left to the
exchange, which answers with its own error message. Each function raises
a ValueError with a clear message when the text cannot be converted.

Usage:
    from src.validators import parse_side, parse_quantity
    parse_side("BUY")        # 'buy'
    parse_quantity("ten")    # raises ValueError
"""

from src.config import VALID_SIDES


def parse_side(text: str) -> str:
    """
    Parse an order side.

    Deribit names its order endpoints after the side, so the value is
    normalised to lower case ("buy" or "sell").

    Raises:
        ValueError: If the text is neither buy nor sell.
    """
    side = text.strip().lower()
    if side not in VALID_SIDES:
        raise ValueError(f"Side must be 'buy' or 'sell'. Got '{text}'.")
    return side


def parse_quantity(text: str) -> float:
    """
    Parse an order amount.

    Raises:
        ValueError: If the text is not a number.
    """
    try:
        return float(text)
    except (TypeError, ValueError):
        raise ValueError(f"Quantity must be a number. Got '{text}'.")


def parse_price(text: str) -> float:
    """
    Parse a price. Zero is accepted and means "market order" when placing.

    Raises:
        ValueError: If the text is not a number.
    """
    try:
        return float(text)
    except (TypeError, ValueError):
        raise ValueError(f"Price must be a number. Got '{text}'.")


def parse_token(text: str) -> str:
    """
    Parse a single whitespace-free token such as an instrument or order ID.

    Raises:
        ValueError: If the text is empty.
    """
    token = text.strip()
    if not token:
        raise ValueError("Input required.")
    return token.split()[0]
