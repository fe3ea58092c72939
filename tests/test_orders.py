"""
Tests for order query-string construction, response classification and
console input parsing.
"""

import json
import unittest

from src.orders import OrderRequest, format_number
from src.results import ApiFailure, ApiSuccess, parse_document, parse_response
from src.validators import parse_price, parse_quantity, parse_side, parse_token


class TestOrderRequest(unittest.TestCase):

    def test_positive_price_is_limit(self):
        request = OrderRequest("BTC-PERPETUAL", "buy", 10, 65000)
        self.assertEqual(request.order_type, "limit")
        self.assertEqual(request.to_params()["price"], "65000")
        self.assertEqual(request.endpoint, "private/buy")

    def test_zero_price_is_market(self):
        params = OrderRequest("BTC-PERPETUAL", "sell", 10, 0).to_params()
        self.assertEqual(params["type"], "market")
        self.assertNotIn("price", params)

    def test_negative_or_missing_price_is_market(self):
        self.assertEqual(OrderRequest("BTC-PERPETUAL", "buy", 10, -5).order_type, "market")
        self.assertEqual(OrderRequest("BTC-PERPETUAL", "buy", 10).order_type, "market")

    def test_describe(self):
        request = OrderRequest("BTC-PERPETUAL", "buy", 10, 64999.5)
        self.assertEqual(request.describe(), "LIMIT BUY 10 BTC-PERPETUAL @ 64999.5")

    def test_format_number(self):
        self.assertEqual(format_number(10.0), "10")
        self.assertEqual(format_number(0.25), "0.25")
        self.assertEqual(format_number(7), "7")
        self.assertEqual(format_number(0), "0")

    def test_format_number_never_uses_exponents(self):
        self.assertEqual(format_number(0.00001), "0.00001")
        self.assertEqual(format_number(1e16), "10000000000000000")
        self.assertEqual(format_number(2.5e-7), "0.00000025")

    def test_tiny_quantity_in_params(self):
        params = OrderRequest("ETH_USDC", "buy", 0.0001, 0.00005).to_params()
        self.assertEqual(params["amount"], "0.0001")
        self.assertEqual(params["price"], "0.00005")


class TestParseResponse(unittest.TestCase):

    def test_result_key_is_success(self):
        outcome = parse_response('{"result":{"bids":[],"asks":[]}}')
        self.assertIsInstance(outcome, ApiSuccess)
        self.assertTrue(outcome.ok)
        self.assertEqual(json.loads(outcome.pretty()), {"result": {"bids": [], "asks": []}})

    def test_null_result_is_still_success(self):
        self.assertTrue(parse_response('{"result":null}').ok)

    def test_missing_result_is_failure(self):
        outcome = parse_response('{"error":{"message":"bad_request"}}')
        self.assertIsInstance(outcome, ApiFailure)
        self.assertEqual(outcome.reason, "bad_request")

    def test_non_object_is_failure(self):
        self.assertFalse(parse_response("[1, 2, 3]").ok)

    def test_invalid_json_is_failure(self):
        outcome = parse_response("not json")
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.pretty(), "not json")

    def test_document_accepts_error_envelope(self):
        outcome = parse_document('{"error":{"message":"unauthorized"}}')
        self.assertTrue(outcome.ok)
        self.assertIsNone(outcome.result)
        self.assertIn('"message": "unauthorized"', outcome.pretty())

    def test_document_rejects_non_json(self):
        self.assertFalse(parse_document("<html>502</html>").ok)
        self.assertFalse(parse_document("[]").ok)


class TestParsers(unittest.TestCase):

    def test_parse_side(self):
        self.assertEqual(parse_side("BUY"), "buy")
        self.assertEqual(parse_side(" sell "), "sell")
        with self.assertRaises(ValueError):
            parse_side("hold")

    def test_parse_numbers(self):
        self.assertEqual(parse_quantity("10"), 10.0)
        self.assertEqual(parse_price("0"), 0.0)
        with self.assertRaises(ValueError):
            parse_quantity("ten")
        with self.assertRaises(ValueError):
            parse_price("")

    def test_parse_token(self):
        self.assertEqual(parse_token("  BTC-PERPETUAL "), "BTC-PERPETUAL")
        self.assertEqual(parse_token("ETH-1 extra"), "ETH-1")
        with self.assertRaises(ValueError):
            parse_token("   ")


if __name__ == "__main__":
    unittest.main()
