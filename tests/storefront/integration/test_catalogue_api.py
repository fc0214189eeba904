"""Integration tests for the catalogue and comment endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers
from storefront.api.routes import book_router, comment_router, genre_router, member_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(genre_router)
    app.include_router(book_router)
    app.include_router(comment_router)
    app.include_router(member_router)
    register_exception_handlers(app)
    return TestClient(app)


def _create_genre(client, name="Classics"):
    response = client.post("/genres", json={"name": name})
    assert response.status_code == 201
    return response.json()["genre_id"]


def _add_book(client, genre_id=None, **overrides):
    payload = {"name": "The Name of the Rose", "sale_price": 20.0, "genre_id": genre_id}
    payload.update(overrides)
    response = client.post("/books", json=payload)
    assert response.status_code == 201
    return response.json()["book_id"]


def _post_comment(client, book_id, **overrides):
    payload = {"text": "Wonderful.", "full_name": "Nigar Aliyeva", "email": "nigar@example.com"}
    payload.update(overrides)
    return client.post(f"/books/{book_id}/comments", json=payload)


class TestGenres:
    def test_list_genres_with_counts(self, client):
        classics = _create_genre(client, "Classics")
        _create_genre(client, "Poetry")
        _add_book(client, classics)
        _add_book(client, classics, name="Middlemarch")

        genres = {g["name"]: g["book_count"] for g in client.get("/genres").json()}
        assert genres == {"Classics": 2, "Poetry": 0}

    def test_duplicate_genre(self, client):
        _create_genre(client, "Classics")
        response = client.post("/genres", json={"name": "Classics"})
        assert response.status_code == 400


class TestBookListing:
    def test_list_all_books(self, client):
        classics = _create_genre(client, "Classics")
        poetry = _create_genre(client, "Poetry")
        _add_book(client, classics)
        _add_book(client, poetry, name="Leaves of Grass")

        data = client.get("/books").json()
        assert [b["name"] for b in data["books"]] == ["The Name of the Rose", "Leaves of Grass"]
        assert len(data["genres"]) == 2

    def test_filter_by_genre(self, client):
        classics = _create_genre(client, "Classics")
        poetry = _create_genre(client, "Poetry")
        _add_book(client, classics)
        _add_book(client, poetry, name="Leaves of Grass")

        data = client.get("/books", params={"genre_id": poetry}).json()
        assert [b["name"] for b in data["books"]] == ["Leaves of Grass"]

    def test_card_shows_discounted_price(self, client):
        _add_book(client, sale_price=20.0, discount_percent=25)
        card = client.get("/books").json()["books"][0]
        assert card["sale_price"] == 20.0
        assert card["price"] == 15.0


class TestBookDetail:
    def test_detail(self, client):
        genre_id = _create_genre(client, "Classics")
        book_id = _add_book(client, genre_id, author="Umberto Eco", description="Monks and murder.")
        client.post(f"/books/{book_id}/images", json={"image": "rose.jpg", "poster_status": True})

        response = client.get(f"/books/{book_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["book"]["author"] == "Umberto Eco"
        assert data["book"]["poster_image"] == "rose.jpg"
        assert data["genre_name"] == "Classics"
        assert data["description"] == "Monks and murder."
        assert [i["image"] for i in data["images"]] == ["rose.jpg"]

    def test_unknown_book(self, client):
        assert client.get("/books/999").status_code == 404

    def test_related_books_newest_first_limited_to_five(self, client):
        classics = _create_genre(client, "Classics")
        poetry = _create_genre(client, "Poetry")
        ids = [_add_book(client, classics, name=f"Classic {n}") for n in range(7)]
        _add_book(client, poetry, name="Leaves of Grass")

        related = client.get(f"/books/{ids[0]}").json()["related_books"]
        assert [b["book_id"] for b in related] == sorted(ids, reverse=True)[:5]

    def test_only_approved_comments_are_shown(self, client):
        book_id = _add_book(client)
        approved = _post_comment(client, book_id, text="Approved one").json()["comment_id"]
        _post_comment(client, book_id, text="Still pending")
        client.put(f"/comments/{approved}/moderate", json={"action": "Approve"})

        comments = client.get(f"/books/{book_id}").json()["comments"]
        assert [c["text"] for c in comments] == ["Approved one"]


class TestComments:
    def test_anonymous_comment(self, client):
        book_id = _add_book(client)
        response = _post_comment(client, book_id)
        assert response.status_code == 201
        assert response.json()["comment_id"]

    def test_anonymous_comment_needs_email(self, client):
        book_id = _add_book(client)
        response = _post_comment(client, book_id, email=None)
        assert response.status_code == 400

    def test_comment_on_unknown_book(self, client):
        assert _post_comment(client, 999).status_code == 404

    def test_signed_in_member_comment(self, client):
        client.post(
            "/members",
            json={
                "username": "reader42",
                "email": "reader42@example.com",
                "full_name": "Leyla Mammadova",
                "password": "Secret123",
            },
        )
        book_id = _add_book(client)

        response = client.post(
            f"/books/{book_id}/comments",
            json={"text": "Signed in comment"},
            headers={"X-Authenticated-User": "reader42"},
        )
        assert response.status_code == 201

    def test_moderating_twice_fails(self, client):
        book_id = _add_book(client)
        comment_id = _post_comment(client, book_id).json()["comment_id"]
        client.put(f"/comments/{comment_id}/moderate", json={"action": "Reject", "reason": "Spam"})

        response = client.put(f"/comments/{comment_id}/moderate", json={"action": "Approve"})
        assert response.status_code == 400
