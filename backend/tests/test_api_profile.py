"""Tests for profile API endpoints."""


class TestProfileAPI:
    """Test profile read and update."""

    def test_missing_profile_is_null(self, client, auth_headers):
        response = client.get("/api/v1/profile", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() is None

    def test_update_creates_profile(self, client, auth_headers):
        response = client.patch("/api/v1/profile", headers=auth_headers, json={
            "full_name": "Sam Lee", "currency": "eur"
        })
        assert response.status_code == 200
        assert response.json()["currency"] == "EUR"

        response = client.get("/api/v1/profile", headers=auth_headers)
        assert response.json()["full_name"] == "Sam Lee"

    def test_currency_must_be_three_letters(self, client, auth_headers):
        response = client.patch("/api/v1/profile", headers=auth_headers, json={"currency": "EURO"})
        assert response.status_code == 422

    def test_update_without_user(self, client):
        response = client.patch("/api/v1/profile", json={"currency": "USD"})
        assert response.status_code == 401
