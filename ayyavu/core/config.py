import os
from dotenv import load_dotenv

load_dotenv(override=True)


class Config:
    """
    Base configuration for the portfolio backend.
    Deployments provide paths and credentials via environment variables;
    anything already set on ``app.config`` takes precedence.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))
    PORTFOLIO_DB = os.getenv('PORTFOLIO_DB', os.path.join(DB_DIR, 'construction.db'))

    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', os.path.join(os.getcwd(), 'uploads'))
    UPLOAD_URL_PREFIX = '/uploads'

    # Default admin principal, created on first boot
    ADMIN_USERNAME = os.getenv('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', 'admin123')
    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', '10'))

    SEED_SAMPLE_PROJECTS = os.getenv('SEED_SAMPLE_PROJECTS', '1') not in ('0', 'false', 'False')

    # Comma separated list, '*' allows any origin on the public catalog API
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Port for local server
    PORT = int(os.getenv('PORT', '3000'))

    @classmethod
    def defaults(cls):
        """Return the settings the app factory copies into ``app.config``."""
        return {
            'SECRET_KEY': cls.SECRET_KEY,
            'DB_DIR': cls.DB_DIR,
            'PORTFOLIO_DB': cls.PORTFOLIO_DB,
            'UPLOAD_FOLDER': cls.UPLOAD_FOLDER,
            'UPLOAD_URL_PREFIX': cls.UPLOAD_URL_PREFIX,
            'ADMIN_USERNAME': cls.ADMIN_USERNAME,
            'ADMIN_PASSWORD': cls.ADMIN_PASSWORD,
            'BCRYPT_ROUNDS': cls.BCRYPT_ROUNDS,
            'SEED_SAMPLE_PROJECTS': cls.SEED_SAMPLE_PROJECTS,
            'CORS_ORIGINS': cls.CORS_ORIGINS,
            'LOG_LEVEL': cls.LOG_LEVEL,
            'PORT': cls.PORT,
        }
