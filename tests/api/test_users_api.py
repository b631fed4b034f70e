from fastapi import status


def test_me_requires_token(test_client, app_store):
    response = test_client.get("/api/v1/users/me")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_invalid_token_rejected(test_client, app_store):
    response = test_client.get("/api/v1/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_expired_token_rejected(test_client, app_store, make_token):
    token = make_token(exp=1)
    response = test_client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_sync_creates_then_updates_user(test_client, app_store, make_token):
    first = test_client.post(
        "/api/v1/users/sync", headers={"Authorization": f"Bearer {make_token(name='Jane Doe')}"}
    )
    assert first.status_code == status.HTTP_200_OK
    assert first.json()["name"] == "Jane Doe"

    second = test_client.post(
        "/api/v1/users/sync",
        headers={"Authorization": f"Bearer {make_token(name='Jane D.', picture='https://img.example.com/j.png')}"},
    )

    assert second.json()["id"] == first.json()["id"]
    assert second.json()["name"] == "Jane D."
    assert second.json()["image"] == "https://img.example.com/j.png"
    assert len(app_store.users) == 1


def test_me_returns_profile(test_client, app_store, make_token):
    response = test_client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {make_token()}"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "jane@example.com"
