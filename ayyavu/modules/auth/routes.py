"""
Admin Auth Routes
=================

Login, logout and session check for the single admin role.
"""

from flask import current_app, jsonify, session

from ayyavu.core.errors import AuthFailure, StoreError
from ayyavu.core.forms import request_data
from ayyavu.core.logging_service import logger
from . import auth_bp
from .sessions import SESSION_KEY, current_principal_id, get_session_gate


def get_credential_store():
    return current_app.extensions['ayyavu'].credentials


@auth_bp.route('/login', methods=['POST'])
def login():
    """Admin login"""
    data = request_data()
    username = data.get('username')
    password = data.get('password')

    try:
        principal = get_credential_store().verify(username, password)
    except AuthFailure as e:
        logger.log_security_event('Failed admin login', {'username': username, 'reason': e.reason})
        body, status = e.to_response()
        return jsonify(body), status
    except StoreError as e:
        body, status = e.to_response()
        return jsonify(body), status

    session[SESSION_KEY] = get_session_gate().establish(principal['id'])
    logger.log_user_action('auth', 'login', user_id=principal['id'])
    return jsonify({'success': True, 'message': 'Login successful'})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Admin logout"""
    get_session_gate().revoke(session.pop(SESSION_KEY, None))
    session.clear()
    return jsonify({'success': True, 'message': 'Logout successful'})


@auth_bp.route('/check', methods=['GET'])
def check():
    """Report whether the caller holds a live admin session"""
    return jsonify({'authenticated': current_principal_id() is not None})
