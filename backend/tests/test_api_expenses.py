"""Tests for expenses API endpoints."""

import logging

import pytest


class TestExpensesAPI:
    """Test expenses CRUD endpoints."""

    def test_list_expenses_empty(self, client):
        """Should return an empty page."""
        response = client.get("/api/v1/expenses")
        assert response.status_code == 200
        data = response.json()
        assert data["data"] == []
        assert data["pagination"] == {"limit": 20, "offset": 0, "total": 0}

    def test_list_expenses_newest_first(self, client, january_expenses):
        response = client.get("/api/v1/expenses", params={"limit": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["pagination"]["total"] == 5
        assert [e["amount"] for e in data["data"]] == [99.99, 0.1]

    def test_list_expenses_filters(self, client, january_expenses, sample_category):
        response = client.get("/api/v1/expenses", params={
            "from": "2024-01-01T00:00:00Z",
            "to": "2024-01-31T23:59:59.999Z",
            "categoryId": sample_category.id,
        })
        data = response.json()
        assert data["pagination"]["total"] == 2
        assert all(e["categoryId"] == sample_category.id for e in data["data"])

    def test_list_expenses_scoped_to_user(self, client, january_expenses):
        response = client.get("/api/v1/expenses", headers={"X-User-Id": "someone-else"})
        assert response.status_code == 200
        assert response.json()["pagination"]["total"] == 0

    def test_create_expense(self, client, sample_category):
        """Should create an expense and echo it back in UTC."""
        response = client.post("/api/v1/expenses", json={
            "amount": "12.34",
            "categoryId": sample_category.id,
            "note": "Lunch",
            "date": "2024-01-10T14:00:00+02:00"
        })
        assert response.status_code == 201
        data = response.json()["expense"]
        assert data["amount"] == 12.34
        assert data["categoryId"] == sample_category.id
        assert data["date"].startswith("2024-01-10T12:00:00")
        assert data["date"].endswith("Z")

    def test_create_expense_global_category(self, client, sample_user, global_category):
        response = client.post("/api/v1/expenses", json={
            "amount": 900,
            "category_id": global_category.id,
            "date": "2024-01-01T00:00:00Z"
        })
        assert response.status_code == 201

    def test_create_expense_unknown_category(self, client, sample_user, other_user_category):
        response = client.post("/api/v1/expenses", json={
            "amount": 5,
            "categoryId": other_user_category.id,
            "date": "2024-01-01T00:00:00Z"
        })
        assert response.status_code == 404

    @pytest.mark.parametrize("amount", [0, -3, "abc"])
    def test_create_expense_invalid_amount(self, client, amount):
        response = client.post("/api/v1/expenses", json={
            "amount": amount,
            "date": "2024-01-01T00:00:00Z"
        })
        assert response.status_code == 422

    def test_get_expense(self, client, sample_expense):
        response = client.get(f"/api/v1/expenses/{sample_expense.id}")
        assert response.status_code == 200
        assert response.json()["expense"]["id"] == sample_expense.id

    def test_get_expense_not_owned(self, client, sample_expense):
        response = client.get(
            f"/api/v1/expenses/{sample_expense.id}", headers={"X-User-Id": "someone-else"}
        )
        assert response.status_code == 404

    def test_update_expense(self, client, sample_expense):
        response = client.put(f"/api/v1/expenses/{sample_expense.id}", json={
            "amount": "41.50",
            "categoryId": None,
            "date": "2024-01-11T00:00:00Z"
        })
        assert response.status_code == 200
        data = response.json()["expense"]
        assert data["amount"] == 41.5
        assert data["categoryId"] is None
        assert data["note"] is None

    def test_update_is_logged(self, client, sample_expense, caplog):
        with caplog.at_level(logging.INFO, logger="app.api.expenses"):
            response = client.put(f"/api/v1/expenses/{sample_expense.id}", json={
                "amount": "12.00",
                "date": "2024-01-12T00:00:00Z"
            })
        assert response.status_code == 200
        assert f"Updated expense {sample_expense.id} for user user-1" in caplog.messages

    def test_delete_expense(self, client, sample_expense):
        response = client.delete(f"/api/v1/expenses/{sample_expense.id}")
        assert response.status_code == 200
        response = client.get(f"/api/v1/expenses/{sample_expense.id}")
        assert response.status_code == 404
