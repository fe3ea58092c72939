"""
Order Request Module for the Deribit Trading Client.

An OrderRequest turns console input into the query string of a single
Deribit order call. Deribit has one endpoint per side (private/buy and
private/sell); the order type is chosen from the price:

    - price > 0   → LIMIT order, rests on the book at that price
    - price <= 0  → MARKET order, fills immediately at the best available
                    price and carries no price parameter

Usage:
    from src.orders import OrderRequest
    request = OrderRequest("BTC-PERPETUAL", "buy", 10, 65000)
    request.endpoint     # 'private/buy'
    request.to_params()  # {'amount': '10', 'instrument_name': ..., 'type': 'limit', 'price': '65000'}
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional


def format_number(value: float) -> str:
    """
    Render a quantity or price for the query string.

    Always fixed-point, never exponent notation; whole numbers drop their
    trailing ".0" so that 10.0 is sent as "10" and 1e-05 as "0.00001".
    """
    return format(Decimal(repr(float(value))).normalize(), "f")


@dataclass
class OrderRequest:
    """
    A single buy or sell order, built from console input.

    Attributes:
        instrument_name: Deribit instrument, e.g. "BTC-PERPETUAL".
        side:            "buy" or "sell".
        quantity:        Order amount in the instrument's contract units.
        price:           Limit price; None or <= 0 places a market order.
    """

    instrument_name: str
    side: str
    quantity: float
    price: Optional[float] = None

    @property
    def is_limit(self) -> bool:
        return self.price is not None and self.price > 0

    @property
    def order_type(self) -> str:
        return "limit" if self.is_limit else "market"

    @property
    def endpoint(self) -> str:
        return f"private/{self.side}"

    def to_params(self) -> Dict[str, str]:
        params = {
            "amount": format_number(self.quantity),
            "instrument_name": self.instrument_name,
            "type": self.order_type,
        }
        if self.is_limit:
            params["price"] = format_number(self.price)
        return params

    def describe(self) -> str:
        text = f"{self.order_type.upper()} {self.side.upper()} {format_number(self.quantity)} {self.instrument_name}"
        if self.is_limit:
            text += f" @ {format_number(self.price)}"
        return text
