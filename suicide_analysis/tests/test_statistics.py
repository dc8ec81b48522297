from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from suicide_analysis.infrastructure.container import Container
from suicide_analysis.infrastructure.db.models import Resource, SuicideRecord


@pytest.fixture()
def seeded(container: Container) -> None:
    with container.session_factory() as session:
        session.add_all(
            [
                SuicideRecord(country_code="USA", stage_id=1, year=2001, gender="male", suicides=10, population=1000),
                SuicideRecord(country_code="USA", stage_id=2, year=2003, gender="female", suicides=4, population=900),
                SuicideRecord(country_code="FRA", stage_id=1, year=2000, gender="male", suicides=7, population=800),
                SuicideRecord(country_code="FRA", stage_id=1, year=2005, gender="female", suicides=2, population=None),
                Resource(country_code="USA", name="988 Lifeline", phone="988", url="https://988lifeline.org"),
                Resource(country_code="FRA", name="SOS Amitie", phone="09 72 39 40 50"),
            ]
        )
        session.commit()


def test_root_says_hello(client: FlaskClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.get_data(as_text=True) == "Hello World!"


def test_health(client: FlaskClient) -> None:
    response = client.get("/api/health")

    assert response.get_json() == {"ok": True, "database": "ok"}


@pytest.mark.usefixtures("seeded")
def test_list_all_records_ordered_by_year(client: FlaskClient) -> None:
    response = client.get("/api/v1/suicides/")

    assert response.status_code == 200
    years = [row["year"] for row in response.get_json()]
    assert years == [2000, 2001, 2003, 2005]
    assert response.get_json()[0] == {
        "id": 3,
        "countryCode": "FRA",
        "stageId": 1,
        "year": 2000,
        "gender": "male",
        "suicides": 7,
        "population": 800,
    }


@pytest.mark.usefixtures("seeded")
def test_list_without_trailing_slash(client: FlaskClient) -> None:
    response = client.get("/api/v1/suicides")

    assert response.status_code == 200
    assert len(response.get_json()) == 4


@pytest.mark.usefixtures("seeded")
@pytest.mark.parametrize(
    ("query", "expected_years"),
    [
        ({}, [2000, 2001, 2003, 2005]),
        ({"year_start": "2001", "year_end": "2003"}, [2001, 2003]),
        ({"id_country": "fra"}, [2000, 2005]),
        ({"gender": "Female"}, [2003, 2005]),
        ({"id_stage": "1", "id_country": "FRA", "gender": ""}, [2000, 2005]),
        ({"year_start": "2006"}, []),
    ],
)
def test_search_filters(client: FlaskClient, query: dict[str, str], expected_years: list[int]) -> None:
    response = client.get("/api/v1/suicides/data", query_string=query)

    assert response.status_code == 200
    assert [row["year"] for row in response.get_json()] == expected_years


def test_search_rejects_non_integer_year(client: FlaskClient) -> None:
    response = client.get("/api/v1/suicides/data", query_string={"year_start": "abc"})

    assert response.status_code == 400
    assert "year_start" in response.get_json()["context"]["fields"]


def test_search_rejects_inverted_range(client: FlaskClient) -> None:
    response = client.get(
        "/api/v1/suicides/data", query_string={"year_start": "2005", "year_end": "2000"}
    )

    assert response.status_code == 400


@pytest.mark.usefixtures("seeded")
def test_resources(client: FlaskClient) -> None:
    all_resources = client.get("/api/v1/suicides/resources").get_json()
    assert [r["countryCode"] for r in all_resources] == ["FRA", "USA"]

    usa = client.get("/api/v1/suicides/resources/usa")
    assert usa.status_code == 200
    assert [r["name"] for r in usa.get_json()] == ["988 Lifeline"]

    empty = client.get("/api/v1/suicides/resources/DEU")
    assert empty.status_code == 200
    assert empty.get_json() == []


def test_resources_invalid_id(client: FlaskClient) -> None:
    response = client.get("/api/v1/suicides/resources/US")

    assert response.status_code == 400
    assert response.get_json() == {
        "error": "Invalid ID format",
        "code": "invalid_id_format",
        "context": {"id": "US"},
    }


def test_gender_filter_ignores_stored_case(client: FlaskClient, container: Container) -> None:
    with container.session_factory() as session:
        session.add_all(
            [
                SuicideRecord(country_code="DEU", stage_id=1, year=2010, gender="Male", suicides=3),
                SuicideRecord(country_code="DEU", stage_id=1, year=2011, gender="FEMALE", suicides=1),
            ]
        )
        session.commit()

    male = client.get("/api/v1/suicides/data", query_string={"gender": "Male"})
    female = client.get("/api/v1/suicides/data", query_string={"gender": "female"})

    assert [row["year"] for row in male.get_json()] == [2010]
    assert [row["year"] for row in female.get_json()] == [2011]
    assert male.get_json()[0]["gender"] == "Male"
