"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_validate_card_with_get_body(client: TestClient) -> None:
    response = client.request(
        "GET", "/validateCreditCard", json={"cardNumber": "4539148803436467"}
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() is True


def test_validate_card_with_post(client: TestClient) -> None:
    response = client.post(
        "/validateCreditCard", json={"cardNumber": "4539148803436468"}
    )

    assert response.status_code == 200
    assert response.json() is False


def test_validate_card_non_digits(client: TestClient) -> None:
    response = client.post("/validateCreditCard", json={"cardNumber": "12a4"})

    assert response.json() is False


def test_validate_card_malformed_body_defaults_to_empty(client: TestClient) -> None:
    response = client.post(
        "/validateCreditCard",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json() is True


def test_validate_card_wrong_field_type_defaults_to_empty(client: TestClient) -> None:
    response = client.post("/validateCreditCard", json={"cardNumber": 4539148803436467})

    assert response.status_code == 200
    assert response.json() is True


def test_nutritional_score_for_food(client: TestClient) -> None:
    response = client.request(
        "GET",
        "/getNutritionalScore",
        json={
            "energyKj": 3370,
            "sugar": 0,
            "saturatedFattyAcids": 0,
            "sodiumMg": 0,
            "fruitesPercent": 0,
            "fiberGram": 0,
            "proteinGram": 0,
            "isWater": False,
            "foodType": 0,
        },
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {
        "Value": 10,
        "Grade": "C",
        "Positive": 0,
        "Negative": 10,
        "ScoreType": 0,
    }


def test_nutritional_score_for_water(client: TestClient) -> None:
    response = client.post(
        "/getNutritionalScore",
        json={"energyKj": 4000, "sugar": 60, "isWater": True, "foodType": 2},
    )

    data = response.json()
    assert data["Grade"] == "A"
    assert data["Value"] == 0
    assert data["ScoreType"] == 2


def test_nutritional_score_accepts_category_name(client: TestClient) -> None:
    response = client.post(
        "/getNutritionalScore",
        json={
            "energyKj": 3400,
            "sugar": 50,
            "fiberGram": 5,
            "proteinGram": 10,
            "foodType": "cheese",
        },
    )

    data = response.json()
    assert data["Value"] == 10
    assert data["Grade"] == "E"
    assert data["ScoreType"] == 3


def test_nutritional_score_malformed_fields_default_to_zero(
    client: TestClient,
) -> None:
    response = client.post(
        "/getNutritionalScore",
        json={"energyKj": "lots", "sugar": [1, 2], "isWater": {"x": 1}},
    )

    assert response.status_code == 200
    assert response.json() == {
        "Value": 0,
        "Grade": "B",
        "Positive": 0,
        "Negative": 0,
        "ScoreType": 0,
    }


def test_nutritional_score_empty_body(client: TestClient) -> None:
    response = client.post("/getNutritionalScore")

    assert response.status_code == 200
    assert response.json()["Grade"] == "B"


def test_nutritional_score_non_object_body(client: TestClient) -> None:
    response = client.post("/getNutritionalScore", json=[1, 2, 3])

    assert response.status_code == 200
    assert response.json()["Value"] == 0


def test_nutritional_score_rejects_unknown_category(client: TestClient) -> None:
    response = client.post("/getNutritionalScore", json={"foodType": 7})

    assert response.status_code == 422


def test_nutritional_score_rejects_unknown_category_name(client: TestClient) -> None:
    response = client.post("/getNutritionalScore", json={"foodType": "soup"})

    assert response.status_code == 422


def test_validate_card_deeply_nested_body_defaults_to_empty(
    client: TestClient,
) -> None:
    response = client.post(
        "/validateCreditCard",
        content=b"[" * 100000 + b"]" * 100000,
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json() is True


def test_validate_card_matches_key_ignoring_case(client: TestClient) -> None:
    response = client.post("/validateCreditCard", json={"CardNumber": "12a4"})

    assert response.json() is False


def test_nutritional_score_matches_keys_ignoring_case(client: TestClient) -> None:
    response = client.post(
        "/getNutritionalScore", json={"EnergyKj": 3400, "FOODTYPE": "1"}
    )

    data = response.json()
    assert data["Negative"] == 10
    assert data["ScoreType"] == 1
