"""
Session Gate
============

Maps opaque session tokens to admin principal ids. The token travels in
Flask's signed session cookie; the mapping itself lives server side in a
pluggable store so logout really revokes access.

Sessions never expire on their own and are lost on process restart when
the in-memory store is used.
"""

import secrets
import threading
from functools import wraps

from flask import current_app, jsonify, session

from ayyavu.core.errors import Unauthenticated

SESSION_KEY = 'admin_token'


class InMemorySessionStore:
    """Process-wide token store for single-instance deployments."""

    def __init__(self):
        self._sessions = {}
        self._lock = threading.Lock()

    def get(self, token):
        with self._lock:
            return self._sessions.get(token)

    def set(self, token, principal_id):
        with self._lock:
            self._sessions[token] = principal_id

    def delete(self, token):
        with self._lock:
            self._sessions.pop(token, None)

    def __len__(self):
        return len(self._sessions)


class SessionGate:

    def __init__(self, store=None):
        self.store = store if store is not None else InMemorySessionStore()

    def establish(self, principal_id):
        token = secrets.token_urlsafe(32)
        self.store.set(token, principal_id)
        return token

    def authenticate(self, token):
        """Return the principal id for ``token`` or raise Unauthenticated."""
        if not token:
            raise Unauthenticated()
        principal_id = self.store.get(token)
        if principal_id is None:
            raise Unauthenticated()
        return principal_id

    def revoke(self, token):
        if token:
            self.store.delete(token)


def get_session_gate():
    return current_app.extensions['ayyavu'].session_gate


def current_principal_id():
    """Principal id for the current request, or None when not logged in."""
    try:
        return get_session_gate().authenticate(session.get(SESSION_KEY))
    except Unauthenticated:
        return None


def require_admin(f):
    """Reject the request with 401 before the view does any work."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            get_session_gate().authenticate(session.get(SESSION_KEY))
        except Unauthenticated as e:
            body, status = e.to_response()
            return jsonify(body), status
        return f(*args, **kwargs)
    return decorated_function
