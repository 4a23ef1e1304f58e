"""
Ayyavu Server
=============

Run with:
    ayyavu-server

or:
    python -m ayyavu.server

Environment variables (or a .env file) configure the port, database file,
upload folder and default admin credentials; see ``ayyavu.core.config``.
"""

from flask import Flask

from ayyavu import Ayyavu


def create_app(config=None):
    """Build the Flask app. ``config`` entries override environment defaults."""
    app = Flask(__name__)
    app.config['SESSION_COOKIE_HTTPONLY'] = True
    app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'
    if config:
        app.config.update(config)

    Ayyavu(app)
    return app


def main():
    app = create_app()
    port = app.config['PORT']

    print("\n" + "=" * 60)
    print("Ayyavu Construction Portfolio API")
    print("=" * 60)
    print(f"Server:          http://localhost:{port}")
    print(f"Projects API:    http://localhost:{port}/api/projects")
    print(f"Admin login:     POST http://localhost:{port}/api/admin/login")
    print(f"Database:        {app.config['PORTFOLIO_DB']}")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=port, debug=False)


if __name__ == '__main__':
    main()
