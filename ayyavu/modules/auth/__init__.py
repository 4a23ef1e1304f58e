"""
Admin Auth Module

Provides the admin authentication gate:
- bcrypt credential verification
- Server-side session tokens (login/logout/check)
- ``require_admin`` decorator for mutation routes
"""

from flask import Blueprint

auth_bp = Blueprint('admin_auth', __name__, url_prefix='/api/admin')

from . import routes
from .credentials import CredentialStore
from .sessions import InMemorySessionStore, SessionGate, require_admin

__all__ = ['auth_bp', 'CredentialStore', 'InMemorySessionStore', 'SessionGate', 'require_admin']
