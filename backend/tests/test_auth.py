from app.core.security import create_access_token, create_refresh_token
from app.models.user import UserRole
from app.services.users import get_user, upsert_user

PASSWORD = "Sup3r-Secret-Pass!"


def register(client, email="new@example.com", password=PASSWORD):
    return client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "first_name": "Nia", "last_name": "Lee"},
    )


def login(client, email, password=PASSWORD):
    return client.post("/api/auth/login", data={"username": email, "password": password})


def test_register_creates_plain_user(client):
    resp = register(client)

    assert resp.status_code == 201
    body = resp.json()
    assert body["email"] == "new@example.com"
    assert body["role"] == "user"
    assert "hashed_password" not in body


def test_register_rejects_duplicates_and_weak_passwords(client):
    assert register(client).status_code == 201
    assert register(client).status_code == 400
    assert register(client, email="weak@example.com", password="password").status_code == 400


def test_login_and_fetch_current_user(client):
    register(client)

    resp = login(client, "new@example.com")
    assert resp.status_code == 200
    tokens = resp.json()
    assert tokens["token_type"] == "bearer"

    me = client.get("/api/auth/user", headers={"Authorization": f"Bearer {tokens['access_token']}"})
    assert me.status_code == 200
    assert me.json()["email"] == "new@example.com"


def test_login_with_wrong_password(client):
    register(client)
    assert login(client, "new@example.com", "Wrong-Passw0rd!!").status_code == 400
    assert login(client, "nobody@example.com").status_code == 400


def test_refresh_issues_new_tokens(client, make_user):
    user = make_user()

    resp = client.post("/api/auth/refresh", json={"refresh_token": create_refresh_token(user.id)})

    assert resp.status_code == 200
    assert resp.json()["access_token"]


def test_access_token_cannot_refresh(client, make_user):
    user = make_user()
    resp = client.post("/api/auth/refresh", json={"refresh_token": create_access_token(user.id)})
    assert resp.status_code == 401


def test_refresh_token_cannot_authenticate(client, make_user):
    user = make_user()
    resp = client.get("/api/auth/user", headers={"Authorization": f"Bearer {create_refresh_token(user.id)}"})
    assert resp.status_code == 401


def test_garbage_token_is_rejected_even_where_auth_is_optional(client):
    headers = {"Authorization": "Bearer not-a-jwt"}
    assert client.get("/api/auth/user", headers=headers).status_code == 401
    assert client.get("/api/properties", headers=headers).status_code == 401


def test_inactive_user_is_refused(client, db, make_user, auth_headers):
    user = make_user()
    user.is_active = False
    db.commit()

    assert client.get("/api/auth/user", headers=auth_headers(user)).status_code == 403


def test_upsert_user_inserts_then_updates(db):
    created = upsert_user(db, {"id": "ext-123", "email": "ext@example.com", "first_name": "Old"})
    first_updated_at = created.updated_at

    updated = upsert_user(db, {"id": "ext-123", "first_name": "New", "role": UserRole.agent})

    assert updated.id == "ext-123"
    assert updated.email == "ext@example.com"
    assert updated.first_name == "New"
    assert updated.role == UserRole.agent
    assert updated.updated_at >= first_updated_at
    assert get_user(db, "ext-123").hashed_password is None
