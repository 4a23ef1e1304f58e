"""
Credential Store, Session Gate and admin auth route tests.
Run with: pytest tests/test_auth.py -v
"""

import pytest

from ayyavu.core.errors import AuthFailure, Unauthenticated
from ayyavu.modules.auth.credentials import CredentialStore, hash_password, verify_password
from ayyavu.modules.auth.sessions import SESSION_KEY, InMemorySessionStore, SessionGate


@pytest.fixture
def credentials(app):
    return CredentialStore(app.config["PORTFOLIO_DB"])


# ---------------------------------------------------------------------------
# Credential Store
# ---------------------------------------------------------------------------

def test_default_admin_verifies(credentials):
    principal = credentials.verify("admin", "admin123")
    assert principal["username"] == "admin"
    assert principal["id"] is not None


def test_wrong_password_is_mismatch(credentials):
    with pytest.raises(AuthFailure) as exc:
        credentials.verify("admin", "wrong-password")
    assert exc.value.reason == AuthFailure.MISMATCH


def test_unknown_user_is_not_found(credentials):
    with pytest.raises(AuthFailure) as exc:
        credentials.verify("nobody", "admin123")
    assert exc.value.reason == AuthFailure.NOT_FOUND


def test_missing_password_is_mismatch(credentials):
    with pytest.raises(AuthFailure) as exc:
        credentials.verify("admin", None)
    assert exc.value.reason == AuthFailure.MISMATCH


def test_stored_hash_uses_bcrypt_cost_10(credentials):
    principal = credentials.get_by_username("admin")
    assert principal["password_hash"].startswith("$2b$10$")
    assert principal["password_hash"] != "admin123"


def test_ensure_principal_is_idempotent(credentials):
    assert credentials.ensure_principal("admin", "something-else") is False
    # Original password still valid
    credentials.verify("admin", "admin123")


def test_ensure_principal_creates_new_admin(credentials):
    assert credentials.ensure_principal("site-manager", "s3cret!") is True
    assert credentials.verify("site-manager", "s3cret!")["username"] == "site-manager"


def test_over_long_password_is_mismatch(credentials):
    with pytest.raises(AuthFailure) as exc:
        credentials.verify("admin", "x" * 100)
    assert exc.value.reason == AuthFailure.MISMATCH


@pytest.mark.parametrize("password", [12345, ["admin123"], {"p": "admin123"}])
def test_non_string_password_is_mismatch(credentials, password):
    with pytest.raises(AuthFailure) as exc:
        credentials.verify("admin", password)
    assert exc.value.reason == AuthFailure.MISMATCH


@pytest.mark.parametrize("username", [None, 7, ["admin"]])
def test_non_string_username_is_not_found(credentials, username):
    with pytest.raises(AuthFailure) as exc:
        credentials.verify(username, "admin123")
    assert exc.value.reason == AuthFailure.NOT_FOUND


def test_over_long_bootstrap_password_is_rejected(credentials):
    with pytest.raises(ValueError):
        credentials.ensure_principal("night-watch", "x" * 73)
    assert credentials.get_by_username("night-watch") is None


def test_hash_password_is_salted():
    first = hash_password("admin123")
    second = hash_password("admin123")
    assert first != second
    assert verify_password("admin123", first)
    assert verify_password("admin123", second)


# ---------------------------------------------------------------------------
# Session Gate
# ---------------------------------------------------------------------------

def test_establish_and_authenticate():
    gate = SessionGate()
    token = gate.establish(7)
    assert gate.authenticate(token) == 7


def test_tokens_are_unique():
    gate = SessionGate()
    assert gate.establish(1) != gate.establish(1)


@pytest.mark.parametrize("token", [None, "", "not-a-live-token"])
def test_authenticate_rejects_missing_or_unknown(token):
    with pytest.raises(Unauthenticated):
        SessionGate().authenticate(token)


def test_revoke_ends_session():
    gate = SessionGate()
    token = gate.establish(1)

    gate.revoke(token)

    with pytest.raises(Unauthenticated):
        gate.authenticate(token)


def test_revoke_unknown_token_is_noop():
    gate = SessionGate()
    gate.revoke("never-issued")
    gate.revoke(None)


def test_gate_uses_injected_store():
    class RecordingStore:
        def __init__(self):
            self.data = {}

        def get(self, token):
            return self.data.get(token)

        def set(self, token, principal_id):
            self.data[token] = principal_id

        def delete(self, token):
            self.data.pop(token, None)

    store = RecordingStore()
    gate = SessionGate(store)
    token = gate.establish(3)

    assert store.data == {token: 3}
    gate.revoke(token)
    assert store.data == {}


def test_in_memory_store_len():
    store = InMemorySessionStore()
    store.set("a", 1)
    store.set("b", 2)
    store.delete("a")
    assert len(store) == 1


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

def test_login_success_sets_session(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})

    assert response.status_code == 200
    assert response.get_json()["success"] is True
    with client.session_transaction() as sess:
        assert sess.get(SESSION_KEY)


def test_login_accepts_form_body(client):
    response = client.post("/api/admin/login", data={"username": "admin", "password": "admin123"})
    assert response.status_code == 200


def test_login_wrong_password(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": "nope"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid credentials"}
    assert client.get("/api/admin/check").get_json() == {"authenticated": False}


def test_login_unknown_user(client):
    response = client.post("/api/admin/login", json={"username": "root", "password": "admin123"})
    assert response.status_code == 401


def test_check_and_logout(admin_client):
    assert admin_client.get("/api/admin/check").get_json() == {"authenticated": True}

    response = admin_client.post("/api/admin/logout")

    assert response.get_json()["success"] is True
    assert admin_client.get("/api/admin/check").get_json() == {"authenticated": False}


def test_logout_revokes_token_server_side(app, admin_client):
    with admin_client.session_transaction() as sess:
        token = sess[SESSION_KEY]

    admin_client.post("/api/admin/logout")

    # Replaying the old token must not work once revoked
    with admin_client.session_transaction() as sess:
        sess[SESSION_KEY] = token
    response = admin_client.delete("/api/admin/projects/1")

    assert response.status_code == 401
    assert app.extensions["ayyavu"].projects.count() == 6


def test_logout_without_session(client):
    response = client.post("/api/admin/logout")
    assert response.status_code == 200


def test_login_with_over_long_password(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": "x" * 100})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid credentials"}


def test_login_with_numeric_password(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": 12345})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid credentials"}


def test_login_with_json_array_body(client):
    response = client.post("/api/admin/login", json=["admin", "admin123"])

    assert response.status_code == 401
    assert client.get("/api/admin/check").get_json() == {"authenticated": False}
