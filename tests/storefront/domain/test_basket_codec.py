"""Tests for the basket token codec."""

import json

import pytest
from storefront.basket.basket import Basket, BasketEntry, MalformedBasketError
from storefront.basket.codec import decode, encode


def _basket(*pairs):
    return Basket(entries=tuple(BasketEntry(item_id=i, quantity=q) for i, q in pairs))


class TestDecodeEmpty:
    def test_absent_token_is_empty_basket(self):
        assert decode(None) == Basket.empty()

    def test_empty_string_is_empty_basket(self):
        assert decode("") == Basket.empty()

    def test_empty_list_is_empty_basket(self):
        assert decode("[]").is_empty


class TestRoundTrip:
    def test_round_trip_preserves_order_and_quantities(self):
        basket = _basket((7, 2), (3, 1), (12, 5))
        assert decode(encode(basket)) == basket

    def test_round_trip_of_empty_basket(self):
        assert decode(encode(Basket.empty())) == Basket.empty()

    def test_encoded_token_is_readable_json(self):
        token = encode(_basket((7, 2)))
        assert json.loads(token) == [{"BookId": 7, "Count": 2}]

    def test_decodes_token_written_by_existing_clients(self):
        basket = decode('[{"BookId":4,"Count":1},{"BookId":9,"Count":3}]')
        assert basket == _basket((4, 1), (9, 3))


class TestMalformedTokens:
    @pytest.mark.parametrize(
        "token",
        [
            "not valid",
            "{",
            '{"BookId": 1, "Count": 1}',
            '[{"BookId": 1}]',
            '[{"Count": 1}]',
            '[{"BookId": "1", "Count": 1}]',
            '[{"BookId": 1, "Count": 1.5}]',
            '[{"BookId": true, "Count": 1}]',
            '[{"BookId": 1, "Count": 0}]',
            '[{"BookId": 1, "Count": -2}]',
            "[1, 2]",
            "[" * 5000,
            '[{"BookId": ' + "1" * 5000 + ', "Count": 1}]',
        ],
    )
    def test_rejects_malformed_token(self, token):
        with pytest.raises(MalformedBasketError):
            decode(token)

    def test_rejects_duplicate_entries(self):
        with pytest.raises(MalformedBasketError) as exc:
            decode('[{"BookId": 1, "Count": 1}, {"BookId": 1, "Count": 2}]')
        assert "more than once" in exc.value.reason

    def test_one_bad_record_rejects_the_whole_token(self):
        with pytest.raises(MalformedBasketError):
            decode('[{"BookId": 1, "Count": 2}, {"BookId": 2, "Count": "x"}]')

    def test_error_carries_validation_messages(self):
        with pytest.raises(MalformedBasketError) as exc:
            decode("not valid")
        assert "basket" in exc.value.messages
