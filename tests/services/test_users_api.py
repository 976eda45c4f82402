from __future__ import annotations

from starlette.testclient import TestClient

from filmgraph.common.settings import APIConfig, Settings
from filmgraph.services.api.app import create_app


def _create(api_client, login, email=None, **extra):
    body = {"email": email or f"{login}@nostromo.space", "login": login}
    body.update(extra)
    return api_client.post("/api/users", json=body)


def test_user_crud_flow(api_client):
    r = _create(api_client, "ripley", birthday="1990-01-07")
    assert r.status_code == 201, r.text
    user = r.json()
    assert user["id"] == 1
    assert user["name"] == "ripley"
    assert user["friends"] == []

    r = api_client.put("/api/users", json={"id": 1, "email": "ellen@nostromo.space", "login": "ripley",
                                            "name": "Ellen"})
    assert r.status_code == 200, r.text
    assert r.json()["name"] == "Ellen"
    assert r.json()["email"] == "ellen@nostromo.space"

    r = api_client.get("/api/users/1")
    assert r.status_code == 200
    assert r.json()["login"] == "ripley"

    assert [u["id"] for u in api_client.get("/api/users").json()] == [1]


def test_user_conflicts_and_not_found(api_client):
    assert _create(api_client, "ripley").status_code == 201

    r = _create(api_client, "other", email="ripley@nostromo.space")
    assert r.status_code == 409
    assert "ripley@nostromo.space" in r.json()["message"]

    r = _create(api_client, "RIPLEY", email="fresh@nostromo.space")
    assert r.status_code == 409
    assert "RIPLEY" in r.json()["message"]

    assert api_client.get("/api/users/9").status_code == 404
    r = api_client.put("/api/users", json={"id": 9, "email": "n@n.io", "login": "nobody"})
    assert r.status_code == 404


def test_user_field_validation(api_client):
    for extra in (
        {"login": "abc"},
        {"login": "has space"},
        {"email": "not-an-email"},
        {"birthday": "2999-01-01"},
    ):
        body = {"email": "ash@weyland.com", "login": "ash_01", **extra}
        r = api_client.post("/api/users", json=body)
        assert r.status_code == 400, (extra, r.text)


def test_friends_endpoints(api_client):
    ids = [_create(api_client, f"user{i}").json()["id"] for i in range(1, 6)]
    one, two, three, four, five = ids

    for f in (two, three, four):
        assert api_client.put(f"/api/users/{one}/friends/{f}").status_code == 204
    api_client.put(f"/api/users/{two}/friends/{three}")
    api_client.put(f"/api/users/{two}/friends/{five}")

    r = api_client.get(f"/api/users/{one}/friends/common/{two}")
    assert r.status_code == 200, r.text
    assert [u["id"] for u in r.json()] == [three]

    friends = api_client.get(f"/api/users/{two}/friends").json()
    assert [u["id"] for u in friends] == [one, three, five]

    assert api_client.delete(f"/api/users/{one}/friends/{two}").status_code == 204
    assert api_client.delete(f"/api/users/{one}/friends/{two}").status_code == 204
    assert [u["id"] for u in api_client.get(f"/api/users/{two}/friends").json()] == [three, five]

    assert api_client.put(f"/api/users/{one}/friends/{one}").status_code == 204
    assert one not in api_client.get(f"/api/users/{one}").json()["friends"]

    assert api_client.put(f"/api/users/{one}/friends/404").status_code == 404
    assert api_client.get("/api/users/404/friends").status_code == 404


def test_routes_follow_configured_prefix():
    settings = Settings(_env_file=None, api=APIConfig(prefix="/v2"))
    with TestClient(create_app(settings=settings)) as client:
        r = client.post("/v2/users", json={"email": "ash@weyland.com", "login": "ash_01"})
        assert r.status_code == 201, r.text
        assert client.get("/v2/users/1").json()["login"] == "ash_01"
        assert client.get("/api/users/1").status_code == 404
        assert client.get("/v2/openapi.json").status_code == 200
