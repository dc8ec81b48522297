from __future__ import annotations

from flask.testing import FlaskClient


def _signup(client: FlaskClient, username: str, email: str) -> None:
    response = client.post(
        "/api/v1/suicides/signup",
        json={"username": username, "password": "secret1", "email": email, "countryCode": "US"},
    )
    assert response.status_code == 201


def test_add_testimonial_requires_auth(client: FlaskClient) -> None:
    response = client.post("/api/v1/suicides/testimonial", json={"testimonial": "hi"})

    assert response.status_code == 401


def test_add_and_list_testimonials_newest_first(client: FlaskClient) -> None:
    _signup(client, "alice", "alice@example.com")
    first = client.post("/api/v1/suicides/testimonial", json={"testimonial": "First story"})
    assert first.status_code == 201
    assert first.get_json()["username"] == "alice"

    _signup(client, "bob", "bob@example.com")
    second = client.post("/api/v1/suicides/testimonial", json={"testimonial": "Second story"})
    assert second.status_code == 201

    listing = client.get("/api/v1/suicides/testimonials")

    assert listing.status_code == 200
    body = listing.get_json()
    assert [t["testimonial"] for t in body] == ["Second story", "First story"]
    assert [t["username"] for t in body] == ["bob", "alice"]
    assert {"id", "userId", "username", "testimonial", "createdAt"} == set(body[0])


def test_blank_testimonial_rejected(client: FlaskClient) -> None:
    _signup(client, "alice", "alice@example.com")

    response = client.post("/api/v1/suicides/testimonial", json={"testimonial": "   "})

    assert response.status_code == 400
    assert response.get_json()["error"] == "All fields are required"
