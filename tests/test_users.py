import pytest

from conftest import PASSWORD, signup, unique_email
from tasktracker.models.user import User

MISSING_ID = "0" * 32


def test_welcome(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] is True


def test_get_all_users_excludes_password(client, alice, bob):
    r = client.get("/getallusers")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] is True
    assert {u["user_id"] for u in body["users"]} == {alice["user_id"], bob["user_id"]}
    for u in body["users"]:
        assert "password" not in u
    assert "password" not in r.text


def test_get_user(client, alice):
    r = client.get(f"/getuser/{alice['user_id']}")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "User found"
    assert body["user"]["email"] == alice["email"]
    assert "password" not in body["user"]


def test_get_user_not_found(client):
    r = client.get(f"/getuser/{MISSING_ID}")
    assert r.status_code == 404
    assert r.json() == {"message": "User not found", "status": False, "code": "not_found"}


@pytest.mark.parametrize("bad_id", ["123", "not-an-id", "A" * 32, "0" * 31])
def test_get_user_invalid_id(client, bad_id):
    r = client.get(f"/getuser/{bad_id}")
    assert r.status_code == 400
    assert r.json()["code"] == "invalid_id"
    assert r.json()["message"] == "Invalid user id"


def test_update_user_full_overwrite(client, alice, db):
    new_email = unique_email("alicia")
    r = client.post(f"/updateuser/{alice['user_id']}", json={
        "first_name": "Alicia",
        "last_name": "Smith",
        "email": new_email,
        "password": "newsecret",
    })
    assert r.status_code == 200
    assert r.json() == {"message": "User updated successfully", "status": True}

    user = client.get(f"/getuser/{alice['user_id']}").json()["user"]
    assert (user["first_name"], user["last_name"], user["email"]) == ("Alicia", "Smith", new_email)
    assert user["created_at"] == alice["created_at"]

    stored = db.get(User, alice["user_id"])
    assert stored.password != "newsecret"

    assert client.post("/login", json={"email": new_email, "password": "newsecret"}).json()["status"] is True
    assert client.post("/login", json={"email": new_email, "password": PASSWORD}).json()["status"] is False


def test_update_user_requires_all_fields(client, alice):
    r = client.post(f"/updateuser/{alice['user_id']}", json={"first_name": "Alicia"})
    assert r.status_code == 422
    assert client.get(f"/getuser/{alice['user_id']}").json()["user"]["first_name"] == "Alice"


def test_update_user_not_found_and_invalid_id(client):
    body = {"first_name": "Nobody", "last_name": "Here", "email": unique_email(), "password": PASSWORD}
    r = client.post(f"/updateuser/{MISSING_ID}", json=body)
    assert r.status_code == 404
    assert r.json()["code"] == "not_found"

    r = client.post("/updateuser/xyz", json=body)
    assert r.status_code == 400
    assert r.json()["code"] == "invalid_id"


def test_delete_user(client, alice):
    r = client.post(f"/deleteuser/{alice['user_id']}")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "User deleted successfully"
    assert body["user"]["user_id"] == alice["user_id"]
    assert "password" not in body["user"]

    assert client.get(f"/getuser/{alice['user_id']}").status_code == 404
    r = client.post(f"/deleteuser/{alice['user_id']}")
    assert r.status_code == 404


def test_signup_after_delete_reuses_email(client):
    email = unique_email()
    user = signup(client, email=email)
    client.post(f"/deleteuser/{user['user_id']}")
    again = signup(client, email=email)
    assert again["user_id"] != user["user_id"]
