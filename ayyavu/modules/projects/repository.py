"""
Project Repository
==================

Owns the ``projects`` table. Every read and write of the catalog goes
through here.

Optional numeric and date fields are coalesced with ``value or None`` before
they reach the store, so empty strings become NULL. A numeric ``0`` is
falsy too and is stored as NULL as well; form submissions send ``"0"``,
which is kept.
"""

from ayyavu.core.database import Database, utc_timestamp
from ayyavu.core.errors import NotFound

# Columns rewritten by a full-replace update, in statement order
EDITABLE_FIELDS = ('title', 'description', 'location', 'status', 'category',
                   'area', 'bedrooms', 'bathrooms', 'price', 'completion_date')

# Coalesced to NULL when falsy
OPTIONAL_FIELDS = ('bedrooms', 'bathrooms', 'price', 'completion_date')

# Equality filters accepted by list(), in clause order
FILTER_FIELDS = ('status', 'category')

_SELECT_COLS = '''id, title, description, location, status, category, image_url,
                  area, bedrooms, bathrooms, price, completion_date,
                  created_at, updated_at'''


def normalize_fields(data):
    """Pick the editable fields from ``data`` and null out empty optionals."""
    values = {field: data.get(field) for field in EDITABLE_FIELDS}
    for field in OPTIONAL_FIELDS:
        values[field] = values[field] or None
    return values


def parse_project_id(value):
    """Path segment to integer id. Anything that is not one names no project."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise NotFound()


def build_filter(**filters):
    """Build a WHERE clause from the filters that were actually supplied.

    Returns ``(clause, params)``; the clause is empty when no filter is set.
    Values are always bound as parameters.
    """
    conditions = []
    params = []
    for field in FILTER_FIELDS:
        value = filters.get(field)
        if value:
            conditions.append(f'{field} = ?')
            params.append(value)

    where = f' WHERE {" AND ".join(conditions)}' if conditions else ''
    return where, params


class ProjectRepository:

    def __init__(self, db_path):
        self.db_path = db_path

    def list(self, status=None, category=None):
        """Projects matching the filters, most recently created first"""
        where, params = build_filter(status=status, category=category)
        with Database.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(f'''
                SELECT {_SELECT_COLS}
                FROM projects{where}
                ORDER BY created_at DESC, id DESC
            ''', params)
            return [dict(row) for row in cursor.fetchall()]

    def get(self, project_id):
        with Database.connect(self.db_path) as conn:
            return self._fetch(conn, project_id)

    def count(self):
        with Database.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute('SELECT COUNT(*) FROM projects')
            return cursor.fetchone()[0]

    def create(self, data, media_ref=None):
        """Insert a project and return the stored row, id included"""
        values = normalize_fields(data)
        now = utc_timestamp()

        columns = EDITABLE_FIELDS + ('image_url', 'created_at', 'updated_at')
        params = [values[field] for field in EDITABLE_FIELDS] + [media_ref, now, now]

        with Database.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(f'''
                INSERT INTO projects ({', '.join(columns)})
                VALUES ({', '.join('?' for _ in columns)})
            ''', params)
            return self._fetch(conn, cursor.lastrowid)

    def update(self, project_id, data, media_ref=None):
        """Full-replace update.

        ``image_url`` is only touched when ``media_ref`` is given, and
        ``updated_at`` is refreshed even if nothing else changed.
        """
        values = normalize_fields(data)

        set_clauses = [f'{field} = ?' for field in EDITABLE_FIELDS]
        params = [values[field] for field in EDITABLE_FIELDS]

        set_clauses.append('updated_at = ?')
        params.append(utc_timestamp())

        if media_ref:
            set_clauses.append('image_url = ?')
            params.append(media_ref)

        params.append(project_id)

        with Database.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(f'''
                UPDATE projects
                SET {', '.join(set_clauses)}
                WHERE id = ?
            ''', params)
            if cursor.rowcount == 0:
                raise NotFound()
            return self._fetch(conn, project_id)

    def delete(self, project_id):
        with Database.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute('DELETE FROM projects WHERE id = ?', (project_id,))
            if cursor.rowcount == 0:
                raise NotFound()

    @staticmethod
    def _fetch(conn, project_id):
        cursor = conn.cursor()
        cursor.execute(f'SELECT {_SELECT_COLS} FROM projects WHERE id = ?', (project_id,))
        row = cursor.fetchone()
        if not row:
            raise NotFound()
        return dict(row)
