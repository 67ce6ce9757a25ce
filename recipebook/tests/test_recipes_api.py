from __future__ import annotations

import pytest
from flask.testing import FlaskClient

SOUP = {
    "name": "Tomato Soup",
    "instructions": "Simmer for 20 minutes.",
    "ingredients": [{"name": "Tomato", "amount": 4}, {"name": "Basil"}],
}
SALAD = {"name": "Caesar Salad", "ingredients": [{"name": "Romaine"}, {"name": "Parmesan", "amount": 30, "unit": "g"}]}
ONION = {"name": "French Onion Soup", "ingredients": [{"name": "Onion", "amount": 3}]}


def _login(client: FlaskClient, username: str = "remy") -> dict[str, str]:
    client.post("/api/auth/register", json={"username": username, "password": "ratatouille1"})
    response = client.post("/api/auth/login", json={"username": username, "password": "ratatouille1"})
    client.delete_cookie("auth_token")
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


@pytest.fixture()
def auth(client: FlaskClient) -> dict[str, str]:
    return _login(client)


@pytest.fixture()
def seeded(client: FlaskClient, auth: dict[str, str]) -> FlaskClient:
    for body in (SOUP, SALAD, ONION):
        assert client.post("/api/recipes", json=body, headers=auth).status_code == 201
    return client


def test_empty_listing_is_not_found(client: FlaskClient) -> None:
    response = client.get("/api/recipes")

    assert response.status_code == 404
    assert response.get_json() == {"error": "recipes_not_found"}


def test_create_requires_session(client: FlaskClient) -> None:
    response = client.post("/api/recipes", json=SOUP)

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthenticated"}


def test_create_with_unknown_token(client: FlaskClient) -> None:
    response = client.post("/api/recipes", json=SOUP, headers={"Authorization": "Bearer forged"})

    assert response.status_code == 401


def test_create_sets_author(client: FlaskClient, auth: dict[str, str]) -> None:
    response = client.post("/api/recipes", json=SOUP, headers=auth)

    assert response.status_code == 201
    body = response.get_json()
    assert body["id"] == 1
    assert body["author_id"] == 1
    assert body["ingredients"][0] == {"name": "Tomato", "amount": 4.0, "unit": None}


def test_create_validates_body(client: FlaskClient, auth: dict[str, str]) -> None:
    response = client.post("/api/recipes", json={"name": "  "}, headers=auth)

    assert response.status_code == 422
    assert "name" in response.get_json()["context"]["fields"]


def test_get_recipe(seeded: FlaskClient) -> None:
    assert seeded.get("/api/recipes/2").get_json()["name"] == "Caesar Salad"
    missing = seeded.get("/api/recipes/99")
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "recipe_not_found"


def test_name_search(seeded: FlaskClient) -> None:
    response = seeded.get("/api/recipes?name=soup")

    assert [r["id"] for r in response.get_json()] == [1, 3]


def test_name_search_without_matches_is_not_found(seeded: FlaskClient) -> None:
    assert seeded.get("/api/recipes?name=pizza").status_code == 404


def test_name_beats_paging(seeded: FlaskClient) -> None:
    response = seeded.get("/api/recipes?name=salad&page=1&pageSize=1&term=soup")

    assert [r["id"] for r in response.get_json()] == [2]


def test_ingredient_search(seeded: FlaskClient) -> None:
    response = seeded.get("/api/recipes?ingredient=onion")

    assert [r["id"] for r in response.get_json()] == [3]


def test_paged_listing(seeded: FlaskClient) -> None:
    response = seeded.get("/api/recipes?page=2&pageSize=1")

    assert response.status_code == 200
    body = response.get_json()
    assert [r["id"] for r in body["items"]] == [2]
    assert body["total_pages"] == 3
    assert body["total_items"] == 3
    assert body["page_number"] == 2


def test_paged_listing_past_the_end(seeded: FlaskClient) -> None:
    body = seeded.get("/api/recipes?page=9&pageSize=2").get_json()

    assert body["items"] == []
    assert body["total_pages"] == 2


def test_paged_listing_sorted_by_name(seeded: FlaskClient) -> None:
    body = seeded.get("/api/recipes?page=1&pageSize=5&sortBy=name&sortDirection=desc&term=soup").get_json()

    assert [r["name"] for r in body["items"]] == ["Tomato Soup", "French Onion Soup"]


@pytest.mark.parametrize(
    ("query", "error"),
    [
        ("page=0&pageSize=1", "bad_pagination"),
        ("page=1&pageSize=1000", "bad_pagination"),
        ("page=1&pageSize=1&sortBy=calories", "bad_sort_field"),
    ],
)
def test_bad_paging_returns_422(seeded: FlaskClient, query: str, error: str) -> None:
    response = seeded.get(f"/api/recipes?{query}")

    assert response.status_code == 422
    assert response.get_json()["error"] == error


def test_update_replaces_recipe(seeded: FlaskClient, auth: dict[str, str]) -> None:
    response = seeded.put(
        "/api/recipes/1", json={"name": "Roasted Tomato Soup", "ingredients": []}, headers=auth
    )

    assert response.status_code == 200
    body = seeded.get("/api/recipes/1").get_json()
    assert body["name"] == "Roasted Tomato Soup"
    assert body["ingredients"] == []
    assert body["author_id"] == 1


def test_update_keeps_original_author(seeded: FlaskClient) -> None:
    other = _login(seeded, "colette")

    response = seeded.put("/api/recipes/1", json={"name": "Soup"}, headers=other)

    assert response.status_code == 200
    assert response.get_json()["author_id"] == 1


def test_update_missing_recipe(seeded: FlaskClient, auth: dict[str, str]) -> None:
    assert seeded.put("/api/recipes/42", json={"name": "Ghost"}, headers=auth).status_code == 404


def test_update_requires_session(seeded: FlaskClient) -> None:
    assert seeded.put("/api/recipes/1", json={"name": "Soup"}).status_code == 401


def test_delete_recipe(seeded: FlaskClient, auth: dict[str, str]) -> None:
    assert seeded.delete("/api/recipes/1").status_code == 401

    response = seeded.delete("/api/recipes/1", headers=auth)
    assert response.status_code == 200
    assert response.get_json() == {"ok": True}

    assert seeded.get("/api/recipes/1").status_code == 404
    assert seeded.delete("/api/recipes/1", headers=auth).status_code == 404
