from app.models.user import UserRole
from app.services.analytics import get_analytics
from app.services.listings import increment_views


def test_analytics_on_empty_database(db):
    summary = get_analytics(db)

    assert summary.total_properties == 0
    assert summary.total_users == 0
    assert summary.total_views == 0
    assert summary.total_inquiries == 0


def test_analytics_counts(client, db, make_user, auth_headers, make_property):
    admin = make_user(UserRole.admin)
    make_user(UserRole.user)
    first = make_property()
    second = make_property()
    for _ in range(3):
        increment_views(db, first.id)
    increment_views(db, second.id)
    client.post(
        "/api/inquiries",
        json={"property_id": first.id, "name": "Kim", "email": "kim@example.com", "message": "Still available?"},
    )

    resp = client.get("/api/analytics", headers=auth_headers(admin))

    assert resp.status_code == 200
    assert resp.json() == {
        "total_properties": 2,
        "total_users": 2,
        "total_views": 4,
        "total_inquiries": 1,
    }


def test_analytics_is_admin_only(client, make_user, auth_headers):
    agent = make_user(UserRole.agent)
    assert client.get("/api/analytics", headers=auth_headers(agent)).status_code == 403
    assert client.get("/api/analytics").status_code == 401


def test_admin_changes_are_audited(client, make_user, auth_headers, make_property):
    admin = make_user(UserRole.admin)
    prop = make_property()
    client.patch(f"/api/properties/{prop.id}", json={"featured": True}, headers=auth_headers(admin))
    client.delete(f"/api/properties/{prop.id}", headers=auth_headers(admin))

    rows = client.get("/api/audit", headers=auth_headers(admin)).json()

    actions = [row["action"] for row in rows]
    assert actions[:2] == ["property_delete", "property_update"]
    assert rows[1]["details"] == "featured"
    assert rows[0]["resource_id"] == prop.id
