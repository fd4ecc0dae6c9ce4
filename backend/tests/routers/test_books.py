"""Tests for books router."""

from app.config import settings

BOOK_PAYLOAD = {
    "title": "A Wizard of Earthsea",
    "author": "Ursula K. Le Guin",
    "isbn": "9780553383041",
    "publisher": "Parnassus",
    "published_year": 1968,
}


def create_book(client, **overrides) -> dict:
    """Helper to create a book through the API and return its JSON body."""
    response = client.post("/api/books", json={**BOOK_PAYLOAD, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateBook:
    """Tests for POST /api/books."""

    def test_create_book(self, client):
        """Creating a book returns it with a generated id and timestamps."""
        data = create_book(client)

        assert isinstance(data["id"], int)
        assert data["title"] == BOOK_PAYLOAD["title"]
        assert data["isbn"] == BOOK_PAYLOAD["isbn"]
        assert "created_at" in data
        assert "updated_at" in data

    def test_create_book_ignores_client_id(self, client):
        """Ids are assigned by the server, never taken from the body."""
        data = create_book(client, id=12345)
        assert data["id"] != 12345

    def test_create_book_requires_title(self, client):
        """Missing title is a validation error."""
        response = client.post("/api/books", json={"author": "Nobody"})
        assert response.status_code == 422

    def test_create_book_rejects_empty_title(self, client):
        """Empty title is a validation error."""
        response = client.post("/api/books", json={"title": ""})
        assert response.status_code == 422

    def test_create_book_duplicate_isbn(self, client):
        """A second book with the same ISBN is a conflict."""
        create_book(client)

        response = client.post("/api/books", json={**BOOK_PAYLOAD, "title": "Other"})

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "Duplicate"
        assert body["details"][0]["field"] == "isbn"


class TestReadBooks:
    """Tests for GET /api/books and GET /api/books/{id}."""

    def test_get_book(self, client):
        """A created book can be fetched by id."""
        created = create_book(client)

        response = client.get(f"/api/books/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_book_not_found(self, client):
        """Unknown ids return a tagged 404 error body."""
        response = client.get("/api/books/999")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "BookNotFound"
        assert body["message"] == "Book not found: 999"
        assert body["path"] == "/api/books/999"
        assert "timestamp" in body

    def test_get_book_invalid_id(self, client):
        """Non-integer ids are rejected by validation."""
        response = client.get("/api/books/not-a-number")
        assert response.status_code == 422

    def test_get_book_id_out_of_range(self, client):
        """Ids beyond the integer column range are validation errors, not 500s."""
        response = client.get("/api/books/99999999999999999999")
        assert response.status_code == 422

    def test_get_book_id_must_be_positive(self, client):
        assert client.get("/api/books/0").status_code == 422
        assert client.get("/api/books/-1").status_code == 422

    def test_list_books(self, client):
        """All books are listed in creation order."""
        first = create_book(client, title="First", isbn=None)
        second = create_book(client, title="Second", isbn=None)

        response = client.get("/api/books")

        assert response.status_code == 200
        assert [b["id"] for b in response.json()] == [first["id"], second["id"]]

    def test_list_books_empty(self, client):
        """An empty catalogue is an empty list."""
        response = client.get("/api/books")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_books_pagination(self, client):
        """skip and limit page through the list."""
        for title in ["A", "B", "C"]:
            create_book(client, title=title, isbn=None)

        response = client.get("/api/books", params={"skip": 1, "limit": 1})

        assert [b["title"] for b in response.json()] == ["B"]

    def test_list_books_limit_bounds(self, client):
        """limit outside the allowed range is rejected."""
        assert client.get("/api/books", params={"limit": 0}).status_code == 422
        assert client.get("/api/books", params={"limit": 100000}).status_code == 422

    def test_find_by_title(self, client):
        """title filters by exact, case-sensitive match."""
        create_book(client, title="Tehanu", isbn=None)
        create_book(client, title="tehanu", isbn=None)
        create_book(client, title="Tehanu", isbn=None)

        response = client.get("/api/books", params={"title": "Tehanu"})

        assert response.status_code == 200
        titles = [b["title"] for b in response.json()]
        assert titles == ["Tehanu", "Tehanu"]

    def test_find_by_title_no_match(self, client):
        """No match is an empty list, not a 404."""
        create_book(client)

        response = client.get("/api/books", params={"title": "Missing"})

        assert response.status_code == 200
        assert response.json() == []


class TestUpdateBook:
    """Tests for PUT /api/books/{id}."""

    def test_update_book(self, client):
        """Matching ids replace the record."""
        created = create_book(client)

        response = client.put(
            f"/api/books/{created['id']}",
            json={**BOOK_PAYLOAD, "id": created["id"], "title": "X"},
        )

        assert response.status_code == 200
        assert response.json()["title"] == "X"
        assert client.get(f"/api/books/{created['id']}").json()["title"] == "X"

    def test_update_book_without_body_id(self, client):
        """The body id is optional."""
        created = create_book(client)

        response = client.put(f"/api/books/{created['id']}", json={"title": "The Farthest Shore"})

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "The Farthest Shore"
        assert body["author"] is None

    def test_update_book_id_mismatch(self, client):
        """Differing path and body ids give a tagged 400 error."""
        created = create_book(client)
        other_id = created["id"] + 1

        response = client.put(
            f"/api/books/{created['id']}", json={**BOOK_PAYLOAD, "id": other_id}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "BookIdMismatch"
        assert {d["field"]: d["message"] for d in body["details"]} == {
            "path.book_id": str(created["id"]),
            "body.id": str(other_id),
        }

    def test_update_book_not_found(self, client):
        """Updating an unknown id is a 404."""
        response = client.put("/api/books/5", json={"id": 5, "title": "X"})

        assert response.status_code == 404
        assert response.json()["error"] == "BookNotFound"
        assert client.get("/api/books").json() == []

    def test_update_book_ids_out_of_range(self, client):
        """Oversized path or body ids are rejected before reaching the store."""
        created = create_book(client)
        huge = 2**63

        path_response = client.put(f"/api/books/{huge}", json={"title": "X"})
        body_response = client.put(
            f"/api/books/{created['id']}", json={"id": huge, "title": "X"}
        )

        assert path_response.status_code == 422
        assert body_response.status_code == 422
        assert client.get(f"/api/books/{created['id']}").json()["title"] == created["title"]

    def test_update_book_mismatch_wins_over_not_found(self, client):
        """The id check runs before the existence check."""
        response = client.put("/api/books/5", json={"id": 7, "title": "X"})

        assert response.status_code == 400
        assert response.json()["error"] == "BookIdMismatch"


class TestDeleteBook:
    """Tests for DELETE /api/books/{id}."""

    def test_delete_book(self, client):
        """Deleted books are no longer retrievable."""
        created = create_book(client)

        response = client.delete(f"/api/books/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"/api/books/{created['id']}").status_code == 404

    def test_delete_book_not_found(self, client):
        """Deleting an unknown id is a 404."""
        response = client.delete("/api/books/999")

        assert response.status_code == 404
        assert response.json()["error"] == "BookNotFound"

    def test_delete_book_id_out_of_range(self, client):
        assert client.delete("/api/books/99999999999999999999").status_code == 422


class TestRateLimit:
    """Write endpoints are rate limited."""

    def test_create_book_rate_limited(self, client):
        """Requests past the configured limit get 429."""
        limit = int(settings.write_rate_limit.split("/")[0])
        statuses = [
            client.post("/api/books", json={"title": f"Book {i}"}).status_code
            for i in range(limit + 1)
        ]

        assert statuses[:limit] == [201] * limit
        assert statuses[-1] == 429


class TestHealth:
    """Tests for service endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
