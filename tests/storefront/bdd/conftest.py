"""Shared BDD fixtures for basket scenarios."""

from decimal import Decimal

import pytest
from pytest_bdd import given, parsers
from storefront.basket.basket import Basket
from storefront.basket.catalog import CatalogItem


@pytest.fixture()
def catalogue():
    return {}


@pytest.fixture()
def state():
    return {"basket": Basket.empty(), "token": None, "error": None}


@given(
    parsers.cfparse(
        'the catalogue has "{name}" as book {book_id:d} priced {price} with {discount:d}% off'
    )
)
def catalogue_book(catalogue, name, book_id, price, discount):
    catalogue[book_id] = CatalogItem(id=book_id, name=name, base_price=Decimal(price), discount_percent=discount)


@given("an empty basket")
def empty_basket(state):
    state["basket"] = Basket.empty()
