"""Tests for the /api/users endpoints and the bearer token gate."""


class TestCurrentUser:
    def test_me(self, client, register_user):
        user_id, headers = register_user("a@example.com", name="Alice")
        response = client.get("/api/users/me", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == user_id
        assert data["email"] == "a@example.com"
        assert data["name"] == "Alice"
        assert data["role"] == "user"
        assert "passwordHash" not in data

    def test_missing_header(self, client):
        response = client.get("/api/users/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        data = response.json()
        assert data["error"] == "MISSING_TOKEN"
        assert data["message"] == ["Missing authorization header"]

    def test_non_bearer_scheme(self, client):
        response = client.get("/api/users/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"

    def test_refresh_token_rejected(self, client):
        registered = client.post(
            "/api/auth/register",
            json={"email": "a@example.com", "password": "secret123", "name": "Alice"},
        ).json()
        response = client.get(
            "/api/users/me",
            headers={"Authorization": f"Bearer {registered['refreshToken']}"},
        )
        assert response.status_code == 401

    def test_deleted_user(self, client, register_user, user_store):
        _, headers = register_user("a@example.com")
        user_store.users.clear()

        response = client.get("/api/users/me", headers=headers)

        assert response.status_code == 401
        data = response.json()
        assert data["error"] == "USER_NOT_FOUND"
        assert data["message"] == ["User not found"]
