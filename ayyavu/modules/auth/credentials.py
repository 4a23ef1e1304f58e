import bcrypt

from ayyavu.core.database import Database, utc_timestamp
from ayyavu.core.errors import AuthFailure

DEFAULT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password, rounds=DEFAULT_ROUNDS):
    """Hash a password using bcrypt.

    Raises ValueError for passwords over 72 bytes, which bcrypt would
    otherwise truncate or refuse depending on its version.
    """
    encoded = password.encode('utf-8')
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f'Password longer than {MAX_PASSWORD_BYTES} bytes')
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(encoded, salt).decode('utf-8')


def verify_password(plain_password, hashed_password):
    """Verify a password against a bcrypt hash.

    Anything that could never have been hashed (not a string, empty, over
    72 bytes) simply fails to verify.
    """
    if not isinstance(plain_password, str) or not plain_password:
        return False
    encoded = plain_password.encode('utf-8')
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, hashed_password.encode('utf-8'))
    except ValueError:
        return False


class CredentialStore:
    """Admin principals kept in the ``admin_users`` table."""

    def __init__(self, db_path, rounds=DEFAULT_ROUNDS):
        self.db_path = db_path
        self.rounds = rounds

    def get_by_username(self, username):
        with Database.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                SELECT id, username, password, created_at
                FROM admin_users WHERE username = ?
            """, (username,))
            row = cursor.fetchone()

        if not row:
            return None
        return {
            'id': row['id'],
            'username': row['username'],
            'password_hash': row['password'],
            'created_at': row['created_at'],
        }

    def verify(self, username, password):
        """Return the principal whose stored hash matches ``password``.

        Raises AuthFailure with reason NOT_FOUND or MISMATCH. Nothing is
        written, there is no lockout or attempt counting.
        """
        principal = self.get_by_username(username) if isinstance(username, str) else None
        if principal is None:
            raise AuthFailure(AuthFailure.NOT_FOUND)

        if not verify_password(password, principal['password_hash']):
            raise AuthFailure(AuthFailure.MISMATCH)

        return principal

    def ensure_principal(self, username, password):
        """Create the principal if no row holds ``username`` yet.

        Returns True when a row was inserted. Raises ValueError when the
        password is over 72 bytes.
        """
        with Database.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT OR IGNORE INTO admin_users (username, password, created_at)
                VALUES (?, ?, ?)
            """, (username, hash_password(password, self.rounds), utc_timestamp()))
            return cursor.rowcount > 0
