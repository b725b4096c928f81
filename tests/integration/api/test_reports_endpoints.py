"""Integration tests for report endpoints."""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration

MOVEMENTS = [
    {"concept": "Salary", "amount": 1000, "type": "INCOME", "date": "2024-01-10"},
    {"concept": "Rent", "amount": 700, "type": "EXPENSE", "date": "2024-01-15"},
    {"concept": 'Bonus "Q1"', "amount": 500, "type": "INCOME", "date": "2024-02-01"},
    {"concept": "Groceries", "amount": 350.5, "type": "EXPENSE", "date": "2024-02-20"},
]


@pytest.fixture
def stored(test_client: TestClient, api_v1_prefix, admin_headers):
    for payload in MOVEMENTS:
        response = test_client.post(
            f"{api_v1_prefix}/movements",
            json=payload,
            headers=admin_headers,
        )
        assert response.status_code == 201


class TestReport:
    """Tests for GET /api/v1/reports."""

    def test_report(self, test_client: TestClient, api_v1_prefix, admin_headers, stored):
        response = test_client.get(f"{api_v1_prefix}/reports", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {
            "balance": 449.5,
            "totalIncome": 1500.0,
            "totalExpense": 1050.5,
            "movementsCount": 4,
            "monthlyData": [
                {"month": "2024-01", "income": 1000.0, "expense": 700.0},
                {"month": "2024-02", "income": 500.0, "expense": 350.5},
            ],
            "balancePercentage": 30.0,
        }

    def test_empty_report(self, test_client: TestClient, api_v1_prefix, admin_headers):
        response = test_client.get(f"{api_v1_prefix}/reports", headers=admin_headers)

        assert response.json() == {
            "balance": 0.0,
            "totalIncome": 0.0,
            "totalExpense": 0.0,
            "movementsCount": 0,
            "monthlyData": [],
            "balancePercentage": None,
        }

    def test_user_is_forbidden(self, test_client: TestClient, api_v1_prefix, user_headers):
        assert test_client.get(f"{api_v1_prefix}/reports", headers=user_headers).status_code == 403


class TestCsvDownload:
    """Tests for GET /api/v1/reports/csv."""

    def test_csv_download(self, test_client: TestClient, api_v1_prefix, admin_headers, stored):
        response = test_client.get(f"{api_v1_prefix}/reports/csv", headers=admin_headers)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="reporte-movimientos-')
        assert disposition.endswith('.csv"')

        text = response.content.decode("utf-8")
        assert text.startswith("\ufeff")
        lines = text.removeprefix("\ufeff").split("\n")
        assert lines == [
            "Concepto;Monto;Tipo;Fecha;Usuario",
            '"Groceries";350.50;Egreso;2024-02-20;"Ada Admin"',
            '"Bonus ""Q1""";500.00;Ingreso;2024-02-01;"Ada Admin"',
            '"Rent";700.00;Egreso;2024-01-15;"Ada Admin"',
            '"Salary";1000.00;Ingreso;2024-01-10;"Ada Admin"',
        ]

    def test_empty_csv_has_header_only(
        self,
        test_client: TestClient,
        api_v1_prefix,
        admin_headers,
    ):
        response = test_client.get(f"{api_v1_prefix}/reports/csv", headers=admin_headers)

        assert response.content.decode("utf-8") == "\ufeffConcepto;Monto;Tipo;Fecha;Usuario"

    def test_user_is_forbidden(self, test_client: TestClient, api_v1_prefix, user_headers):
        response = test_client.get(f"{api_v1_prefix}/reports/csv", headers=user_headers)

        assert response.status_code == 403
