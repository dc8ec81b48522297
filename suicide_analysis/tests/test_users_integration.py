from __future__ import annotations

from flask.testing import FlaskClient

ALICE = {
    "username": "alice",
    "password": "secret1",
    "email": "alice@example.com",
    "countryCode": "US",
}


def _signup(client: FlaskClient, **overrides: str) -> str:
    response = client.post("/api/v1/suicides/signup", json={**ALICE, **overrides})
    assert response.status_code == 201
    return response.get_json()["token"]


def test_user_info_requires_auth(client: FlaskClient) -> None:
    response = client.get("/api/v1/suicides/user")

    assert response.status_code == 401
    assert response.get_json()["error"] == "Unauthorized"
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_user_info_rejects_garbage_token(client: FlaskClient) -> None:
    response = client.get(
        "/api/v1/suicides/user", headers={"Authorization": "Bearer not.a.token"}
    )

    assert response.status_code == 401


def test_user_info_with_cookie(client: FlaskClient) -> None:
    _signup(client)

    response = client.get("/api/v1/suicides/user")

    assert response.status_code == 200
    assert response.get_json() == {
        "id": 1,
        "username": "alice",
        "email": "alice@example.com",
        "countryCode": "US",
    }


def test_update_user_with_bearer_token(client: FlaskClient) -> None:
    token = _signup(client)
    client.delete_cookie("jwtToken")

    response = client.put(
        "/api/v1/suicides/user",
        json={"username": "alicia", "id_country": "fr", "password": "newsecret"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["username"] == "alicia"
    assert body["countryCode"] == "FR"
    assert body["email"] == "alice@example.com"

    relogin = client.post(
        "/api/v1/suicides/login", json={"email": "alice@example.com", "password": "newsecret"}
    )
    assert relogin.status_code == 200


def test_update_user_email_taken(client: FlaskClient) -> None:
    _signup(client, username="bob", email="bob@example.com")
    _signup(client)

    response = client.put("/api/v1/suicides/user", json={"email": "bob@example.com"})

    assert response.status_code == 400
    assert response.get_json()["code"] == "duplicate_email"


def test_update_user_short_password(client: FlaskClient) -> None:
    _signup(client)

    response = client.put("/api/v1/suicides/user", json={"password": "123"})

    assert response.status_code == 400


def test_update_user_accepts_padded_country_code(client: FlaskClient) -> None:
    _signup(client)

    response = client.put("/api/v1/suicides/user", json={"countryCode": " de "})

    assert response.status_code == 200
    assert response.get_json()["countryCode"] == "DE"
