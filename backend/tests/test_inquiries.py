from app.models.inquiry import InquiryStatus
from app.models.user import UserRole
from app.services import inquiries


def inquiry_body(property_id, **extra):
    body = {
        "property_id": property_id,
        "name": "Jamie Buyer",
        "email": "jamie@example.com",
        "phone": "555-0100",
        "message": "Is the basement finished?",
    }
    body.update(extra)
    return body


def test_anonymous_inquiry(client, make_property):
    prop = make_property()

    resp = client.post("/api/inquiries", json=inquiry_body(prop.id))

    assert resp.status_code == 201
    body = resp.json()
    assert body["user_id"] is None
    assert body["status"] == "new"
    assert body["inquiry_type"] == "general"


def test_signed_in_inquiry_is_linked_to_the_user(client, make_user, auth_headers, make_property):
    user = make_user()
    prop = make_property()

    resp = client.post(
        "/api/inquiries", json=inquiry_body(prop.id, inquiry_type="more-info"), headers=auth_headers(user)
    )

    assert resp.status_code == 201
    assert resp.json()["user_id"] == user.id
    assert resp.json()["inquiry_type"] == "more-info"
    mine = client.get("/api/inquiries/user", headers=auth_headers(user)).json()
    assert [i["id"] for i in mine] == [resp.json()["id"]]


def test_inquiry_validation(client, make_property):
    prop = make_property()

    assert client.post("/api/inquiries", json=inquiry_body("missing")).status_code == 404
    assert client.post("/api/inquiries", json=inquiry_body(prop.id, email="not-an-email")).status_code == 422
    assert client.post("/api/inquiries", json=inquiry_body(prop.id, inquiry_type="haggle")).status_code == 422
    assert client.post("/api/inquiries", json=inquiry_body(prop.id, message="")).status_code == 422


def test_property_inquiries_for_staff_only(client, make_user, auth_headers, make_property):
    admin = make_user(UserRole.admin)
    owner = make_user(UserRole.agent)
    other_agent = make_user(UserRole.agent)
    shopper = make_user(UserRole.user)
    prop = make_property(agent_id=owner.id)
    client.post("/api/inquiries", json=inquiry_body(prop.id))
    client.post("/api/inquiries", json=inquiry_body(prop.id, inquiry_type="viewing"))

    url = f"/api/inquiries/property/{prop.id}"
    assert len(client.get(url, headers=auth_headers(admin)).json()) == 2
    assert len(client.get(url, headers=auth_headers(owner)).json()) == 2
    assert client.get(url, headers=auth_headers(other_agent)).status_code == 403
    assert client.get(url, headers=auth_headers(shopper)).status_code == 403
    assert client.get("/api/inquiries/property/missing", headers=auth_headers(admin)).status_code == 404


def test_update_inquiry_status(client, make_user, auth_headers, make_property):
    admin = make_user(UserRole.admin)
    prop = make_property()
    inquiry_id = client.post("/api/inquiries", json=inquiry_body(prop.id)).json()["id"]

    resp = client.patch(f"/api/inquiries/{inquiry_id}", json={"status": "contacted"}, headers=auth_headers(admin))

    assert resp.status_code == 200
    assert resp.json()["status"] == "contacted"
    assert (
        client.patch("/api/inquiries/missing", json={"status": "closed"}, headers=auth_headers(admin)).status_code
        == 404
    )
    assert (
        client.patch(f"/api/inquiries/{inquiry_id}", json={"status": "lost"}, headers=auth_headers(admin)).status_code
        == 422
    )


def test_update_status_service_returns_none_for_missing(db):
    assert inquiries.update_inquiry_status(db, "missing", InquiryStatus.closed) is None
