# File: tests/test_auth.py

import pytest
from sqlalchemy import func, select

from app.core.errors import ConflictError, InternalError
from app.core.security import PasswordHasher, TokenIssuer
from app.db.user_store import CredentialStore
from app.models.user import User
from app.services.auth_service import AuthService


def _signup(client, email="foo@bar.com", password="s3cret"):
    return client.post("/api/signup", json={"email": email, "password": password})


def test_signup_then_login_returns_token(client):
    resp = _signup(client)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    resp = client.post("/api/login", json={"email": "foo@bar.com", "password": "s3cret"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["token"]


def test_signup_does_not_return_token(client):
    resp = _signup(client)
    assert "token" not in resp.json()


@pytest.mark.parametrize("password", ["", "x" * 100, "pässwörd", "s3cret"])
def test_signup_then_login_round_trips_any_password(client, password):
    assert _signup(client, password=password).status_code == 200

    resp = client.post("/api/login", json={"email": "foo@bar.com", "password": password})
    assert resp.status_code == 200
    assert resp.json()["token"]


def test_duplicate_signup_conflicts_regardless_of_password(client):
    _signup(client, password="first")
    resp = _signup(client, password="second")
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "User already exists"}


def test_login_wrong_password(client):
    _signup(client)
    resp = client.post("/api/login", json={"email": "foo@bar.com", "password": "nope"})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Invalid password"}


def test_login_unknown_email(client):
    resp = client.post("/api/login", json={"email": "ghost@bar.com", "password": "x"})
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "User not found"}


def test_email_is_case_sensitive(client):
    _signup(client, email="Foo@Bar.com")
    resp = client.post("/api/login", json={"email": "foo@bar.com", "password": "s3cret"})
    assert resp.status_code == 404


def test_signup_missing_password_is_bad_request(client):
    resp = client.post("/api/signup", json={"email": "foo@bar.com"})
    assert resp.status_code == 400
    assert "password" in resp.json()["message"]


def test_logout_clears_cookie(client):
    resp = client.post("/api/logout")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logged out successfully"}
    assert "token=" in resp.headers.get("set-cookie", "")


def test_token_survives_logout(client, test_settings):
    _signup(client)
    token = client.post(
        "/api/login", json={"email": "foo@bar.com", "password": "s3cret"}
    ).json()["token"]
    client.post("/api/logout")

    claims = TokenIssuer(test_settings.secret_key).verify(token)
    assert claims["sub"]


# -----------------------------
# Service / store level
# -----------------------------

def test_store_rejects_duplicate_email(db_session):
    store = CredentialStore(db_session)
    store.insert(User(email="a@b.c", password_hash="x"))
    with pytest.raises(ConflictError):
        store.insert(User(email="a@b.c", password_hash="y"))

    # session is usable again after the rollback
    assert store.find_by_email("a@b.c") is not None


def test_insert_assigns_id(db_session):
    user = CredentialStore(db_session).insert(User(email="a@b.c", password_hash="x"))
    assert isinstance(user.id, str) and user.id


def test_signup_stores_hash_not_plaintext(db_session):
    service = AuthService(CredentialStore(db_session), PasswordHasher(4), TokenIssuer("k"), bcrypt_rounds=4)
    service.signup(email="a@b.c", password="plain")

    user = CredentialStore(db_session).find_by_email("a@b.c")
    assert user.password_hash != "plain"
    assert user.password_hash.startswith("$2")


class _ExplodingHasher(PasswordHasher):
    def hash(self, password, rounds=None):
        raise ValueError("boom")


def test_hash_failure_is_internal_error_and_inserts_nothing(db_session):
    service = AuthService(CredentialStore(db_session), _ExplodingHasher(4), TokenIssuer("k"))
    with pytest.raises(InternalError):
        service.signup(email="a@b.c", password="plain")

    assert db_session.scalar(select(func.count()).select_from(User)) == 0


def test_login_token_is_bound_to_user_id(db_session):
    issuer = TokenIssuer("k")
    service = AuthService(CredentialStore(db_session), PasswordHasher(4), issuer, bcrypt_rounds=4)
    service.signup(email="a@b.c", password="pw")

    token = service.login(email="a@b.c", password="pw")
    user = CredentialStore(db_session).find_by_email("a@b.c")
    assert issuer.verify(token)["sub"] == user.id
    assert service.authenticate(token).id == user.id
