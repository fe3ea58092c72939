"""
Deribit API Client for Manual Trading.

This module provides a DeribitClient class that wraps the Deribit v2 REST
API. It centralizes all API interactions, classifies every response as an
ApiSuccess or ApiFailure, and provides consistent logging.

The client connects to either the test environment or production based on
the USE_TESTNET flag in config.py.

Trading Concepts:
    - Instrument: A tradable contract, e.g. BTC-PERPETUAL (a perpetual
      future that never expires).
    - Client-credentials grant: The client ID and secret are exchanged once
      for a bearer token that authorizes every private call.
    - Amount: Order size; for inverse perpetuals it is quoted in USD.

Usage:
    from src.client import DeribitClient
    client = DeribitClient()
    client.authenticate()
    book = client.get_order_book("BTC-PERPETUAL")
    positions = client.get_positions()
"""

from typing import Any, Dict, Optional

from src.config import API_BASE_URL, DERIBIT_CLIENT_ID, DERIBIT_CLIENT_SECRET
from src.logger_setup import setup_logger
from src.orders import OrderRequest, format_number
from src.results import ApiFailure, ApiResult, parse_document, parse_response
from src.transport import http_get

logger = setup_logger(__name__)


class Session:
    """
    Holds the bearer token for the lifetime of the process.

    The token is set once by DeribitClient.authenticate() and sent verbatim
    on every private call. It is never refreshed and never checked for
    expiry; when authentication failed it stays None and private calls are
    sent with an empty bearer token, which the exchange rejects.
    """

    def __init__(self, access_token: Optional[str] = None) -> None:
        self.access_token = access_token

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    def authorization_header(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token or ''}"}


class DeribitClient:
    """
    Wrapper around the Deribit v2 REST API.

    One method per endpoint:
    - authenticate        (public/auth)
    - place_order         (private/buy, private/sell)
    - cancel_order        (private/cancel)
    - modify_order        (private/edit)
    - get_order_book      (public/get_order_book)
    - get_positions       (private/get_positions)

    Every method returns an ApiResult. Network failures surface as
    TransportError from src.transport and are not retried.

    Attributes:
        session:  The Session whose token authorizes private calls.
        base_url: API root, e.g. https://test.deribit.com/api/v2.
    """

    def __init__(
        self,
        client_id: str = DERIBIT_CLIENT_ID,
        client_secret: str = DERIBIT_CLIENT_SECRET,
        base_url: str = API_BASE_URL,
        session: Optional[Session] = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else Session()
        logger.info(f"DeribitClient initialized for {self.base_url}")

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def _public(self, path: str, params: Optional[Dict[str, Any]] = None, parse=parse_response) -> ApiResult:
        raw = http_get(self._url(path), params=params)
        return parse(raw)

    def _private(self, path: str, params: Optional[Dict[str, Any]] = None, parse=parse_response) -> ApiResult:
        raw = http_get(
            self._url(path),
            params=params,
            headers=self.session.authorization_header(),
        )
        return parse(raw)

    # -------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------

    def authenticate(self) -> ApiResult:
        """
        Exchange the client ID and secret for a bearer token.

        On success the token from ``result.access_token`` is stored on the
        session. On failure the session is left untouched and the raw
        response is returned inside an ApiFailure.

        Returns:
            ApiSuccess carrying the auth response, or ApiFailure.

        Raises:
            TransportError: If the request could not be sent.
        """
        logger.info("Authenticating with client credentials")
        outcome = self._public(
            "public/auth",
            {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "grant_type": "client_credentials",
            },
        )

        if not outcome.ok:
            logger.error(f"Authentication failed: {outcome.raw}")
            return outcome

        result = outcome.result
        token = result.get("access_token") if isinstance(result, dict) else None
        if not token:
            logger.error(f"Authentication failed: {outcome.raw}")
            return ApiFailure(raw=outcome.raw, reason="response has no 'result.access_token'")

        self.session.access_token = token
        logger.info("Access token retrieved")
        return outcome

    # -------------------------------------------------------------------
    # Order Management Methods
    # -------------------------------------------------------------------

    def place_order(self, request: OrderRequest) -> ApiResult:
        """
        Place a buy or sell order.

        A positive price places a limit order at that price; otherwise a
        market order is sent without a price parameter.

        Args:
            request: The order to send.

        Returns:
            ApiSuccess with the exchange's acknowledgement, or ApiFailure.

        Example:
            >>> outcome = client.place_order(OrderRequest("BTC-PERPETUAL", "buy", 10))
            >>> if outcome.ok:
            ...     print(outcome.result["order"]["order_id"])
        """
        logger.info(f"Placing order: {request.describe()}")
        outcome = self._private(request.endpoint, request.to_params())
        if outcome.ok:
            order = outcome.result.get("order", {}) if isinstance(outcome.result, dict) else {}
            logger.info(
                f"Order placed: ID={order.get('order_id')}, "
                f"State={order.get('order_state')}"
            )
        else:
            logger.error(f"Failed to place order: {outcome.raw}")
        return outcome

    def cancel_order(self, order_id: str) -> ApiResult:
        """Cancel an open order by its ID."""
        logger.info(f"Cancelling order {order_id}")
        outcome = self._private("private/cancel", {"order_id": order_id})
        if outcome.ok:
            logger.info(f"Order {order_id} cancelled")
        else:
            logger.error(f"Failed to cancel order {order_id}: {outcome.raw}")
        return outcome

    def modify_order(self, order_id: str, quantity: float, price: float) -> ApiResult:
        """
        Change the amount and price of an open order.

        Args:
            order_id: The order to edit.
            quantity: New order amount.
            price:    New limit price.

        Returns:
            ApiSuccess with the edited order, or ApiFailure.
        """
        logger.info(f"Modifying order {order_id}: amount={quantity}, price={price}")
        outcome = self._private(
            "private/edit",
            {
                "order_id": order_id,
                "amount": format_number(quantity),
                "price": format_number(price),
            },
        )
        if outcome.ok:
            logger.info(f"Order {order_id} modified")
        else:
            logger.error(f"Failed to modify order {order_id}: {outcome.raw}")
        return outcome

    # -------------------------------------------------------------------
    # Market Data & Account Methods
    # -------------------------------------------------------------------

    def get_order_book(self, instrument_name: str) -> ApiResult:
        """
        Fetch the order book for an instrument (public, no token sent).

        Any JSON object the exchange returns, error envelope included, is
        handed back as an ApiSuccess to be printed verbatim.
        """
        logger.info(f"Fetching order book for {instrument_name}")
        outcome = self._public(
            "public/get_order_book", {"instrument_name": instrument_name}, parse=parse_document
        )
        if not outcome.ok:
            logger.error(f"Failed to fetch order book for {instrument_name}: {outcome.raw}")
        elif "result" not in outcome.body:
            logger.warning(f"Order book request for {instrument_name} returned an error: {outcome.raw}")
        return outcome

    def get_positions(self) -> ApiResult:
        """Fetch the account's open positions, returned verbatim like the order book."""
        logger.info("Fetching current positions")
        outcome = self._private("private/get_positions", parse=parse_document)
        if not outcome.ok:
            logger.error(f"Failed to fetch positions: {outcome.raw}")
        elif isinstance(outcome.result, list):
            logger.info(f"Found {len(outcome.result)} positions")
        else:
            logger.warning(f"Positions request returned an error: {outcome.raw}")
        return outcome
