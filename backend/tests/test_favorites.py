from datetime import datetime

from app.models.favorite import Favorite
from app.services import favorites


def test_favorites_require_authentication(client):
    assert client.get("/api/favorites").status_code == 401
    assert client.post("/api/favorites", json={"property_id": "x"}).status_code == 401


def test_add_list_check_remove(client, make_user, auth_headers, make_property):
    user = make_user()
    headers = auth_headers(user)
    prop = make_property()

    assert client.get(f"/api/favorites/{prop.id}/check", headers=headers).json() == {"is_favorite": False}

    resp = client.post("/api/favorites", json={"property_id": prop.id}, headers=headers)
    assert resp.status_code == 201
    assert resp.json()["property_id"] == prop.id
    assert resp.json()["user_id"] == user.id

    assert client.get(f"/api/favorites/{prop.id}/check", headers=headers).json() == {"is_favorite": True}
    assert [p["id"] for p in client.get("/api/favorites", headers=headers).json()] == [prop.id]

    assert client.delete(f"/api/favorites/{prop.id}", headers=headers).status_code == 204
    assert client.delete(f"/api/favorites/{prop.id}", headers=headers).status_code == 404
    assert client.get("/api/favorites", headers=headers).json() == []


def test_adding_the_same_favorite_twice_keeps_one_row(client, db, make_user, auth_headers, make_property):
    user = make_user()
    headers = auth_headers(user)
    prop = make_property()

    first = client.post("/api/favorites", json={"property_id": prop.id}, headers=headers)
    second = client.post("/api/favorites", json={"property_id": prop.id}, headers=headers)

    assert first.status_code == 201
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    assert len(client.get("/api/favorites", headers=headers).json()) == 1
    assert db.query(Favorite).count() == 1


def test_favorite_unknown_property(client, make_user, auth_headers):
    user = make_user()
    resp = client.post("/api/favorites", json={"property_id": "missing"}, headers=auth_headers(user))
    assert resp.status_code == 404


def test_favorites_are_per_user_and_newest_first(db, make_user, make_property):
    alice = make_user()
    bob = make_user()
    older = make_property()
    newer = make_property()

    favorites.add_favorite(db, alice.id, older.id)
    favorites.add_favorite(db, alice.id, newer.id)
    favorites.add_favorite(db, bob.id, older.id)

    alice_favs = favorites.get_user_favorites(db, alice.id)
    assert [p.id for p in alice_favs] == [newer.id, older.id]
    assert [p.id for p in favorites.get_user_favorites(db, bob.id)] == [older.id]
    assert favorites.is_favorite(db, bob.id, newer.id) is False
    assert favorites.remove_favorite(db, bob.id, newer.id) is False


def test_favorites_added_at_the_same_instant_keep_a_stable_order(db, make_user, make_property):
    user = make_user()
    first = make_property()
    second = make_property()
    stamp = datetime(2024, 6, 1, 9, 30)
    db.add_all(
        [
            Favorite(id="fav-a", user_id=user.id, property_id=first.id, created_at=stamp),
            Favorite(id="fav-b", user_id=user.id, property_id=second.id, created_at=stamp),
        ]
    )
    db.commit()

    listed = [p.id for p in favorites.get_user_favorites(db, user.id)]

    assert listed == [second.id, first.id]
    assert [p.id for p in favorites.get_user_favorites(db, user.id)] == listed
