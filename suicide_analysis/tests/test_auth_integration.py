from __future__ import annotations

from flask.testing import FlaskClient
from jose import jwt
from sqlalchemy import select

from suicide_analysis.infrastructure.container import Container
from suicide_analysis.infrastructure.db.models import AuditLog, User

ALICE = {
    "username": "alice",
    "password": "secret1",
    "email": "alice@example.com",
    "countryCode": "US",
}


def test_signup_login_logout_flow(client: FlaskClient, container: Container) -> None:
    signup = client.post("/api/v1/suicides/signup", json=ALICE)
    assert signup.status_code == 201
    body = signup.get_json()
    assert body["user"]["username"] == "alice"
    assert body["token"]
    assert "password" not in body["user"]
    assert client.get_cookie("jwtToken") is not None

    login = client.post(
        "/api/v1/suicides/login", json={"email": "alice@example.com", "password": "secret1"}
    )
    assert login.status_code == 200
    login_body = login.get_json()
    assert login_body["message"] == "Login successful"
    payload = jwt.decode(
        login_body["token"], "test-secret", algorithms=["HS256"], options={"verify_exp": False}
    )
    assert payload["userId"] == body["user"]["id"]

    logout = client.post("/api/v1/suicides/logout")
    assert logout.status_code == 200
    assert logout.get_json() == {"message": "User logged out successfully"}
    assert "jwtToken=;" in logout.headers["Set-Cookie"]
    assert client.get_cookie("jwtToken") is None

    with container.session_factory() as session:
        stored = session.scalars(select(User)).one()
        assert stored.password_hash != "secret1"
        assert stored.password_hash.startswith("$2b$04$")
        actions = session.scalars(select(AuditLog.action).order_by(AuditLog.id)).all()
        assert actions == ["signup", "login_success", "logout"]


def test_logout_without_cookie_succeeds(client: FlaskClient) -> None:
    response = client.post("/api/v1/suicides/logout")

    assert response.status_code == 200
    assert response.get_json()["message"] == "User logged out successfully"


def test_login_wrong_password_and_unknown_email(client: FlaskClient) -> None:
    client.post("/api/v1/suicides/signup", json=ALICE)

    wrong = client.post(
        "/api/v1/suicides/login", json={"email": "alice@example.com", "password": "wrong"}
    )
    unknown = client.post(
        "/api/v1/suicides/login", json={"email": "bob@example.com", "password": "secret1"}
    )

    assert wrong.status_code == unknown.status_code == 400
    assert wrong.get_json()["error"] == "Invalid email or password"
    assert unknown.get_json()["error"] == "Invalid email or password"


def test_duplicate_email_rejected(client: FlaskClient) -> None:
    assert client.post("/api/v1/suicides/signup", json=ALICE).status_code == 201

    response = client.post(
        "/api/v1/suicides/signup", json={**ALICE, "username": "alice2", "email": "Alice@Example.com"}
    )

    assert response.status_code == 400
    assert response.get_json()["code"] == "duplicate_email"


def test_short_password_rejected(client: FlaskClient) -> None:
    response = client.post("/api/v1/suicides/signup", json={**ALICE, "password": "12345"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "Password must be at least 6 characters long"


def test_missing_fields_rejected(client: FlaskClient) -> None:
    response = client.post("/api/v1/suicides/signup", json={"username": "alice"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "All fields are required"


def test_over_long_login_credentials_fail_generically(client: FlaskClient) -> None:
    client.post("/api/v1/suicides/signup", json=ALICE)

    long_password = client.post(
        "/api/v1/suicides/login", json={"email": "alice@example.com", "password": "x" * 200}
    )
    long_email = client.post(
        "/api/v1/suicides/login", json={"email": "a" * 300 + "@example.com", "password": "secret1"}
    )

    for response in (long_password, long_email):
        assert response.status_code == 400
        assert response.get_json() == {
            "error": "Invalid email or password",
            "code": "invalid_credentials",
        }


def test_padded_country_code_is_accepted(client: FlaskClient) -> None:
    response = client.post("/api/v1/suicides/signup", json={**ALICE, "countryCode": " us "})

    assert response.status_code == 201
    assert response.get_json()["user"]["countryCode"] == "US"


def test_over_long_country_code_rejected(client: FlaskClient) -> None:
    response = client.post("/api/v1/suicides/signup", json={**ALICE, "countryCode": "USAA"})

    assert response.status_code == 400
    assert response.get_json()["context"]["fields"] == ["countryCode"]
