"""Middleware for caller identity."""
from functools import wraps
from flask import session, g, request

from lettings.exceptions import UnauthorizedError


def load_caller_identity():
    """
    Load the calling user's id into g (Flask's per-request global).

    Called before each request. The id comes from the Flask session
    ('user_id') or, for service-to-service calls, the X-User-Id header
    set by the gateway in front of this app.
    """
    user_id = session.get('user_id') or request.headers.get('X-User-Id', '').strip()
    g.user_id = str(user_id) if user_id else None


def require_identity(f):
    """
    Decorator: Require a caller identity.

    Raises UnauthorizedError (401) if no user id was loaded.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if g.get('user_id') is None:
            raise UnauthorizedError()
        return f(*args, **kwargs)
    return decorated_function
