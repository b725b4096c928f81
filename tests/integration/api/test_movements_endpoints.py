"""Integration tests for movement endpoints."""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


def _create(client: TestClient, prefix: str, headers: dict, **overrides):
    payload = {
        "concept": "Office rent",
        "amount": 1200,
        "type": "EXPENSE",
        "date": "2024-03-01",
    }
    payload.update(overrides)
    return client.post(f"{prefix}/movements", json=payload, headers=headers)


class TestCreateMovement:
    """Tests for POST /api/v1/movements."""

    def test_admin_creates_movement(
        self,
        test_client: TestClient,
        api_v1_prefix,
        admin_headers,
        seeded,
    ):
        response = _create(
            test_client,
            api_v1_prefix,
            admin_headers,
            concept="  Consulting  ",
            amount=99.999,
            type="INCOME",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["concept"] == "Consulting"
        assert data["amount"] == 100.0
        assert data["type"] == "INCOME"
        assert data["date"].startswith("2024-03-01T00:00:00")
        assert data["user"] == {"id": str(seeded.admin.id), "name": "Ada Admin"}

    def test_user_cannot_create(self, test_client: TestClient, api_v1_prefix, user_headers):
        response = _create(test_client, api_v1_prefix, user_headers)

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_anonymous_cannot_create(self, test_client: TestClient, api_v1_prefix):
        assert _create(test_client, api_v1_prefix, {}).status_code == 401

    def test_every_violation_is_reported(
        self,
        test_client: TestClient,
        api_v1_prefix,
        admin_headers,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/movements",
            json={"concept": "ab", "amount": -5, "type": "GIFT", "date": "soon"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Invalid data"
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"] == [
            "Concept must be at least 3 characters",
            "Amount must be greater than 0",
            "Type must be INCOME or EXPENSE",
            "Date is invalid",
        ]

    def test_missing_fields(self, test_client: TestClient, api_v1_prefix, admin_headers):
        response = test_client.post(
            f"{api_v1_prefix}/movements",
            json={},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            "Concept is required",
            "Amount is required",
            "Type is required",
            "Date is required",
        ]

    @pytest.mark.parametrize(
        ("overrides", "error"),
        [
            ({"amount": 0.001}, "Amount must be greater than 0"),
            ({"amount": 1e13}, "Amount must be at most 999999999999.99"),
            ({"concept": "c" * 300}, "Concept must be at most 255 characters"),
            ({"date": "0001-01-01T00:00:00+05:00"}, "Date is invalid"),
        ],
    )
    def test_values_the_store_cannot_hold_are_rejected(
        self,
        test_client: TestClient,
        api_v1_prefix,
        admin_headers,
        overrides,
        error,
    ):
        response = _create(test_client, api_v1_prefix, admin_headers, **overrides)

        assert response.status_code == 400
        assert response.json()["errors"] == [error]

        listing = test_client.get(f"{api_v1_prefix}/movements", headers=admin_headers)
        assert listing.json()["total"] == 0

    def test_invalid_movement_is_not_stored(
        self,
        test_client: TestClient,
        api_v1_prefix,
        admin_headers,
    ):
        _create(test_client, api_v1_prefix, admin_headers, amount="lots")

        listing = test_client.get(f"{api_v1_prefix}/movements", headers=admin_headers)
        assert listing.json()["total"] == 0


class TestListMovements:
    """Tests for GET /api/v1/movements."""

    @pytest.fixture
    def stored(self, test_client: TestClient, api_v1_prefix, admin_headers):
        for day, movement_type in ((1, "INCOME"), (2, "EXPENSE"), (3, "INCOME")):
            response = _create(
                test_client,
                api_v1_prefix,
                admin_headers,
                concept=f"Movement {day}",
                type=movement_type,
                date=f"2024-05-0{day}",
            )
            assert response.status_code == 201

    def test_requires_session(self, test_client: TestClient, api_v1_prefix):
        assert test_client.get(f"{api_v1_prefix}/movements").status_code == 401

    def test_plain_user_can_list(
        self,
        test_client: TestClient,
        api_v1_prefix,
        user_headers,
        stored,
    ):
        response = test_client.get(f"{api_v1_prefix}/movements", headers=user_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [m["concept"] for m in data["movements"]] == [
            "Movement 3",
            "Movement 2",
            "Movement 1",
        ]
        assert data["movements"][0]["user"]["name"] == "Ada Admin"

    def test_pagination(self, test_client: TestClient, api_v1_prefix, user_headers, stored):
        response = test_client.get(
            f"{api_v1_prefix}/movements",
            params={"page": 2, "limit": 2},
            headers=user_headers,
        )

        data = response.json()
        assert data["total"] == 3
        assert [m["concept"] for m in data["movements"]] == ["Movement 1"]

    def test_type_filter(self, test_client: TestClient, api_v1_prefix, user_headers, stored):
        response = test_client.get(
            f"{api_v1_prefix}/movements",
            params={"type": "EXPENSE"},
            headers=user_headers,
        )

        data = response.json()
        assert data["total"] == 1
        assert data["movements"][0]["type"] == "EXPENSE"

    def test_unknown_type_filter_is_ignored(
        self,
        test_client: TestClient,
        api_v1_prefix,
        user_headers,
        stored,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/movements",
            params={"type": "GIFT"},
            headers=user_headers,
        )

        assert response.json()["total"] == 3

    def test_empty_list(self, test_client: TestClient, api_v1_prefix, user_headers):
        response = test_client.get(f"{api_v1_prefix}/movements", headers=user_headers)

        assert response.json() == {"movements": [], "total": 0}
