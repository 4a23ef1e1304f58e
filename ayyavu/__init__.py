"""
Ayyavu - Construction Portfolio Backend
=======================================

Flask backend for a construction-company portfolio site:
- Admin authentication with server-side sessions
- Public project catalog API with status/category filters
- Admin CRUD over projects with image uploads

Usage:
    from flask import Flask
    from ayyavu import Ayyavu

    app = Flask(__name__)
    Ayyavu(app)
"""

import os

from flask import jsonify, request, send_from_directory

from .core.config import Config
from .core.database import Database
from .core.logging_service import configure_logging, logger
from .core.seed import seed_sample_projects
from .modules.auth import CredentialStore, SessionGate, auth_bp
from .modules.projects import ProjectRepository, projects_bp
from .modules.projects_public import projects_public_bp

__version__ = '0.1.0'


class Ayyavu:
    """Flask extension wiring the store, the session gate and the blueprints.

    Args:
        app: Flask application, or None to call ``init_app`` later.
        session_store: Optional token store for the session gate; any object
            with ``get``, ``set`` and ``delete``. Defaults to in-memory.
    """

    def __init__(self, app=None, session_store=None):
        self.session_store = session_store
        self.credentials = None
        self.projects = None
        self.session_gate = None
        self._registered_modules = []
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        if app.config.get('DB_DIR') and not app.config.get('PORTFOLIO_DB'):
            app.config['PORTFOLIO_DB'] = os.path.join(app.config['DB_DIR'], 'construction.db')

        # Flask ships SECRET_KEY = None, so fill unset as well as missing keys
        for key, value in Config.defaults().items():
            if app.config.get(key) is None:
                app.config[key] = value

        origins = app.config['CORS_ORIGINS']
        if isinstance(origins, str) and origins != '*':
            app.config['CORS_ORIGINS'] = [o.strip() for o in origins.split(',') if o.strip()]

        configure_logging(app.config['LOG_LEVEL'])

        db_path = app.config['PORTFOLIO_DB']
        Database.init_schema(db_path)
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

        self.credentials = CredentialStore(db_path, rounds=app.config['BCRYPT_ROUNDS'])
        self.projects = ProjectRepository(db_path)
        self.session_gate = SessionGate(self.session_store)

        if self.credentials.ensure_principal(app.config['ADMIN_USERNAME'], app.config['ADMIN_PASSWORD']):
            logger.info('auth', f"Created default admin '{app.config['ADMIN_USERNAME']}'")
        if app.config['SEED_SAMPLE_PROJECTS']:
            seed_sample_projects(db_path)

        self._register_blueprints(app)
        self._register_uploads(app)
        self._register_error_handlers(app)

        app.extensions['ayyavu'] = self

    def _register_blueprints(self, app):
        for name, blueprint in (('auth', auth_bp),
                                ('projects', projects_bp),
                                ('projects_public', projects_public_bp)):
            app.register_blueprint(blueprint)
            self._registered_modules.append(name)

    def _register_uploads(self, app):
        prefix = app.config['UPLOAD_URL_PREFIX'].rstrip('/')

        def serve_upload(filename):
            return send_from_directory(app.config['UPLOAD_FOLDER'], filename)

        app.add_url_rule(f'{prefix}/<path:filename>', 'uploads', serve_upload)
        self._registered_modules.append('uploads')

    @staticmethod
    def _register_error_handlers(app):
        @app.errorhandler(404)
        def not_found(e):
            if request.path.startswith('/api/'):
                return jsonify({'error': 'Not found'}), 404
            return e

        @app.errorhandler(500)
        def server_error(e):
            logger.log_error_with_traceback('app', e)
            return jsonify({'error': 'Internal server error'}), 500

    def get_registered_modules(self):
        return list(self._registered_modules)


__all__ = ['Ayyavu', 'Config']
