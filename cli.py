"""
Interactive CLI Entry Point for the Deribit Trading Client.

Authenticates once with the configured client credentials, then presents
a numbered menu until the user exits:

  1. Place Order          (limit when a price is given, otherwise market)
  2. Cancel Order
  3. Modify Order
  4. Get Order Book
  5. View Current Positions
  6. Exit

Every response is printed as pretty-printed JSON on success or as the raw
response text on failure. A failed request never ends the session; the
menu is shown again.

Usage:
    python cli.py
"""

import sys
from typing import Callable, Optional

from src.client import DeribitClient
from src.config import DEFAULT_INSTRUMENT, USE_TESTNET
from src.logger_setup import setup_logger
from src.orders import OrderRequest
from src.results import ApiResult
from src.transport import TransportError
from src.validators import parse_price, parse_quantity, parse_side, parse_token

logger = setup_logger("cli")

# ─── ANSI Colors ──────────────────────────────────────────────────────────────
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"
GREEN = "\033[92m"
RED = "\033[91m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BLUE = "\033[94m"


def banner():
    """Print the application banner."""
    env = "Testnet" if USE_TESTNET else "PRODUCTION"
    print(f"""
{CYAN}{BOLD}╔══════════════════════════════════════════════════════════════╗
║              Deribit Manual Trading Client                   ║
╚══════════════════════════════════════════════════════════════╝{RESET}
  {DIM}Environment: {env}{RESET}
""")


def print_success(msg):
    print(f"  {GREEN}✅ {msg}{RESET}")


def print_error(msg):
    print(f"  {RED}❌ {msg}{RESET}", file=sys.stderr)


def print_warn(msg):
    print(f"  {YELLOW}⚠️  {msg}{RESET}")


def print_header(title):
    width = 60
    print(f"\n{BLUE}{BOLD}{'═' * width}{RESET}")
    print(f"{BLUE}{BOLD}  {title}{RESET}")
    print(f"{BLUE}{BOLD}{'═' * width}{RESET}")


def prompt_input(label: str, parser: Callable, default: Optional[str] = None):
    """
    Prompt until the text parses.

    Only type parsing happens here; the exchange judges whether the value
    makes sense. EOFError and KeyboardInterrupt propagate to the menu loop.
    """
    while True:
        suffix = f" [{default}]" if default else ""
        raw = input(f"  {CYAN}›{RESET} {label}{suffix}: ").strip()

        if not raw and default:
            raw = default

        if not raw:
            print_warn("Input required.")
            continue

        try:
            return parser(raw)
        except ValueError as e:
            print_warn(str(e))


def show_outcome(outcome: ApiResult, success_label: str, failure_label: str) -> None:
    """Print the pretty JSON on success, or the raw response on failure."""
    if outcome.ok:
        print(f"{success_label}: {outcome.pretty()}")
    else:
        print(f"{failure_label}: {outcome.raw}", file=sys.stderr)


# ─── Operation Handlers ───────────────────────────────────────────────────────

def handle_authenticate(client: DeribitClient) -> bool:
    """Authenticate once at startup. The session continues even on failure."""
    try:
        outcome = client.authenticate()
    except TransportError as e:
        print_error(f"HTTP error: {e}")
        return False

    if outcome.ok:
        print_success("Access token retrieved.")
        return True

    print(f"Authentication failed: {outcome.raw}", file=sys.stderr)
    return False


def handle_place_order(client: DeribitClient, request: OrderRequest) -> None:
    print_header(f"Place Order — {request.describe()}")
    try:
        outcome = client.place_order(request)
    except TransportError as e:
        print_error(f"HTTP error: {e}")
        return
    show_outcome(outcome, "Order placed successfully", "Failed to place order")


def handle_cancel_order(client: DeribitClient, order_id: str) -> None:
    print_header(f"Cancel Order {order_id}")
    try:
        outcome = client.cancel_order(order_id)
    except TransportError as e:
        print_error(f"HTTP error: {e}")
        return
    show_outcome(outcome, "Order canceled successfully", "Failed to cancel order")


def handle_modify_order(client: DeribitClient, order_id: str, quantity: float, price: float) -> None:
    print_header(f"Modify Order {order_id}")
    try:
        outcome = client.modify_order(order_id, quantity, price)
    except TransportError as e:
        print_error(f"HTTP error: {e}")
        return
    show_outcome(outcome, "Order modified successfully", "Failed to modify order")


def handle_order_book(client: DeribitClient, instrument_name: str) -> None:
    print_header(f"Order Book — {instrument_name}")
    try:
        outcome = client.get_order_book(instrument_name)
    except TransportError as e:
        print_error(f"HTTP error: {e}")
        return
    show_outcome(outcome, f"Order Book for {instrument_name}", "Failed to get order book")


def handle_positions(client: DeribitClient) -> None:
    print_header("Current Positions")
    try:
        outcome = client.get_positions()
    except TransportError as e:
        print_error(f"HTTP error: {e}")
        return
    show_outcome(outcome, "Current Positions", "Failed to get positions")


# ─── Interactive Menu ─────────────────────────────────────────────────────────

MENU = f"""
{BOLD}  Choose an operation:{RESET}
  {GREEN}1{RESET}. Place Order
  {GREEN}2{RESET}. Cancel Order
  {GREEN}3{RESET}. Modify Order
  {GREEN}4{RESET}. Get Order Book
  {GREEN}5{RESET}. View Current Positions
  {RED}6{RESET}. Exit"""


def run_menu(client: DeribitClient) -> None:
    """Dispatch menu choices until the user exits or input ends."""
    while True:
        print(MENU)
        try:
            choice = input(f"\n  {CYAN}› Enter your choice: {RESET}").strip()

            if choice == "6":
                print("Exiting program.")
                return

            elif choice == "1":
                instrument = prompt_input("Enter symbol (e.g., BTC-PERPETUAL)", parse_token, DEFAULT_INSTRUMENT)
                side = prompt_input("Enter side (buy/sell)", parse_side)
                quantity = prompt_input("Enter quantity", parse_quantity)
                price = prompt_input("Enter price (0 for market order)", parse_price, "0")
                handle_place_order(client, OrderRequest(instrument, side, quantity, price))

            elif choice == "2":
                order_id = prompt_input("Enter order ID to cancel", parse_token)
                handle_cancel_order(client, order_id)

            elif choice == "3":
                order_id = prompt_input("Enter order ID to modify", parse_token)
                quantity = prompt_input("Enter new quantity", parse_quantity)
                price = prompt_input("Enter new price", parse_price)
                handle_modify_order(client, order_id, quantity, price)

            elif choice == "4":
                instrument = prompt_input(
                    "Enter symbol to get order book (e.g., BTC-PERPETUAL)", parse_token, DEFAULT_INSTRUMENT
                )
                handle_order_book(client, instrument)

            elif choice == "5":
                handle_positions(client)

            else:
                print("Invalid choice. Please try again.")

        except (EOFError, KeyboardInterrupt):
            print("\nExiting program.")
            logger.info("Input closed, leaving menu")
            return


def main() -> int:
    banner()
    client = DeribitClient()
    handle_authenticate(client)
    run_menu(client)
    return 0


if __name__ == "__main__":
    sys.exit(main())
