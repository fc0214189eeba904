import os

import pytest


@pytest.fixture(scope="session")
def _storefront_domain(request):
    """Initialize the storefront domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    from storefront.member.credentials import reset_store

    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    reset_store()
    ctx.pop()


@pytest.fixture
def genre_id():
    from protean import current_domain
    from storefront.genre.management import CreateGenre

    return current_domain.process(CreateGenre(name="Classics"), asynchronous=False)


@pytest.fixture
def add_book(genre_id):
    """Factory: add a book through the command handler and return its id."""
    from protean import current_domain
    from storefront.book.creation import AddBook

    def _add(name="The Name of the Rose", sale_price=20.0, discount_percent=0, **overrides):
        overrides.setdefault("genre_id", genre_id)
        command = AddBook(name=name, sale_price=sale_price, discount_percent=discount_percent, **overrides)
        return current_domain.process(command, asynchronous=False)

    return _add
