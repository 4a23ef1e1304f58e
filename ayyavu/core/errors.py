"""
Error taxonomy shared by the repository, the session gate and the routes.

Each error carries the HTTP status and client-facing message the boundary
responds with; none of them are retried.
"""


class PortfolioError(Exception):
    """Base class for all domain errors."""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_response(self):
        return {'error': self.message}, self.status_code


class AuthFailure(PortfolioError):
    """Submitted credentials did not match a stored principal."""
    NOT_FOUND = 'not_found'
    MISMATCH = 'mismatch'

    status_code = 401
    message = 'Invalid credentials'

    def __init__(self, reason):
        super().__init__()
        self.reason = reason


class Unauthenticated(PortfolioError):
    status_code = 401
    message = 'Authentication required'


class NotFound(PortfolioError):
    status_code = 404
    message = 'Project not found'


class StoreError(PortfolioError):
    """Wraps any failure raised by the underlying database driver."""
    status_code = 500
    message = 'Database error'
