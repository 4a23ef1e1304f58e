import os
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone

from .errors import StoreError
from .logging_service import logger


def utc_timestamp():
    """Current UTC time in the format stored in DATETIME columns."""
    return datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S.%f')


class Database:

    @staticmethod
    @contextmanager
    def connect(path):
        """
        Open a connection with dict-like rows, commit on success and always close.
        Driver errors surface as StoreError.
        """
        conn = None
        try:
            conn = sqlite3.connect(path)
            conn.row_factory = sqlite3.Row
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            if conn is not None:
                conn.rollback()
            logger.error('database', f"Database error on {path}: {e}")
            raise StoreError() from e
        finally:
            if conn is not None:
                conn.close()

    @staticmethod
    def init_schema(path):
        """Create the admin_users and projects tables if they don't exist"""
        db_dir = os.path.dirname(path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

        with Database.connect(path) as conn:
            cursor = conn.cursor()

            cursor.execute('''
                CREATE TABLE IF NOT EXISTS admin_users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    username TEXT UNIQUE NOT NULL,
                    password TEXT NOT NULL,
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
            ''')

            cursor.execute('''
                CREATE TABLE IF NOT EXISTS projects (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    description TEXT,
                    location TEXT,
                    status TEXT CHECK(status IN ('completed', 'ongoing', 'upcoming')) NOT NULL,
                    category TEXT,
                    image_url TEXT,
                    area TEXT,
                    bedrooms INTEGER,
                    bathrooms INTEGER,
                    price DECIMAL(15,2),
                    completion_date DATE,
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
            ''')

            cursor.execute('CREATE INDEX IF NOT EXISTS idx_projects_status ON projects(status)')
            cursor.execute('CREATE INDEX IF NOT EXISTS idx_projects_category ON projects(category)')

        logger.info('database', f"Portfolio database initialized at {path}")
