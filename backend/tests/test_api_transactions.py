"""Tests for transactions API endpoints."""

from datetime import date


class TestTransactionsAPI:
    """Test transactions endpoints."""

    def test_list_transactions_empty(self, client, auth_headers):
        """Should return empty list."""
        response = client.get("/api/v1/transactions", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0

    def test_list_transactions_with_data(self, client, auth_headers, sample_transaction):
        """Should return transactions with their category."""
        response = client.get("/api/v1/transactions", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["category"]["name"] == "Groceries"

    def test_filter_by_date(self, client, auth_headers, sample_transaction):
        response = client.get("/api/v1/transactions", headers=auth_headers, params={
            "start_date": "2024-02-01", "end_date": "2024-02-29"
        })
        assert response.json()["total"] == 0

    def test_create_transaction(self, client, auth_headers, sample_category):
        response = client.post("/api/v1/transactions", headers=auth_headers, json={
            "category_id": sample_category.id,
            "amount": 19.99,
            "type": "expense",
            "description": "Market",
            "date": "2024-01-20"
        })
        assert response.status_code == 201
        data = response.json()
        assert float(data["amount"]) == 19.99
        assert data["date"] == "2024-01-20"

    def test_create_rejects_non_positive_amount(self, client, auth_headers):
        response = client.post("/api/v1/transactions", headers=auth_headers, json={
            "amount": 0, "type": "expense", "description": "Zero", "date": "2024-01-20"
        })
        assert response.status_code == 422

    def test_get_transaction(self, client, auth_headers, sample_transaction):
        """Should return single transaction."""
        response = client.get(f"/api/v1/transactions/{sample_transaction.id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] == sample_transaction.id

    def test_update_transaction(self, client, auth_headers, sample_transaction):
        response = client.patch(
            f"/api/v1/transactions/{sample_transaction.id}",
            headers=auth_headers,
            json={"description": "Corner shop"}
        )
        assert response.status_code == 200
        assert response.json()["description"] == "Corner shop"

    def test_delete_transaction(self, client, auth_headers, sample_transaction):
        response = client.delete(f"/api/v1/transactions/{sample_transaction.id}", headers=auth_headers)
        assert response.status_code == 204

    def test_recent(self, client, auth_headers, sample_transaction):
        response = client.get("/api/v1/transactions/recent", headers=auth_headers, params={"limit": 3})
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_write_without_user(self, client):
        response = client.post("/api/v1/transactions", json={
            "amount": 5, "type": "income", "description": "Gift", "date": date.today().isoformat()
        })
        assert response.status_code == 401
