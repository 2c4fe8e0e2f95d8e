"""
auth.py
-------
Handles all user authentication for the system using a server-issued Flask
session. Provides the pluggable user store, login, logout, and access-control
wrappers for restricting dashboard access to signed-in users.
"""

from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask import (
    Blueprint,
    current_app,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)
from werkzeug.security import check_password_hash

bp = Blueprint('auth', __name__)

# Session keys (same names the browser pages used for sessionStorage)
SESSION_LOGGED_IN = 'isLoggedIn'
SESSION_USERNAME = 'username'
SESSION_ROLE = 'userRole'

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass
class User:
    username: str
    role: str
    password: Optional[str] = None
    password_hash: Optional[str] = None


class StaticUserStore:
    """User store backed by a fixed mapping of name -> {password, role}.

    Names are matched case-insensitively. Anything exposing `get_user(name)`
    can replace it via `create_app(user_store=...)`.
    """

    def __init__(self, users):
        self._users = {name.strip().lower(): dict(entry) for name, entry in users.items()}

    def get_user(self, username):
        key = (username or '').strip().lower()
        entry = self._users.get(key)
        if entry is None:
            return None
        return User(
            username=key,
            role=entry.get('role'),
            password=entry.get('password'),
            password_hash=entry.get('password_hash'),
        )


def authenticate(store, username, password):
    """Return the matching User, or None for unknown user and wrong password alike."""
    user = store.get_user(username)
    if user is None:
        return None
    if user.password_hash:
        ok = check_password_hash(user.password_hash, password or '')
    else:
        ok = user.password is not None and user.password == password
    return user if ok else None


def get_user_store():
    return current_app.extensions['user_store']


def landing_endpoint_for(role):
    return current_app.config['ROLE_LANDING_PAGES'].get(role)


def is_logged_in():
    return session.get(SESSION_LOGGED_IN) is True


def login_required(view_fn):
    """Redirect to the login page unless the session is signed in."""
    @wraps(view_fn)
    def wrapped(*args, **kwargs):
        if not is_logged_in():
            return redirect(url_for('auth.login'))
        return view_fn(*args, **kwargs)
    return wrapped


def require_role(*roles):
    """
    Decorator: require any of `roles`. Signed-in users with another role are
    sent to their own landing page; anonymous users go to login.
    """
    def decorator(view_fn):
        @wraps(view_fn)
        @login_required
        def wrapped(*args, **kwargs):
            role = session.get(SESSION_ROLE)
            if role in roles:
                return view_fn(*args, **kwargs)
            endpoint = landing_endpoint_for(role)
            if endpoint is None:
                session.clear()
                return redirect(url_for('auth.login'))
            return redirect(url_for(endpoint))
        return wrapped
    return decorator


@bp.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'GET':
        return render_template('login.html', username='', error=None)

    wants_json = request.is_json
    data = request.get_json(silent=True) if wants_json else request.form
    if not hasattr(data, 'get'):
        data = {}
    username = str(data.get('username') or '').strip()
    password = str(data.get('password') or '')

    user = authenticate(get_user_store(), username, password)
    landing = landing_endpoint_for(user.role) if user else None
    if landing is None:
        current_app.logger.warning(f"Failed login attempt for {username!r}")
        if wants_json:
            return jsonify({"success": False, "error": INVALID_CREDENTIALS}), 401
        # password is never echoed back into the form
        return render_template('login.html', username=username, error=INVALID_CREDENTIALS), 401

    session.clear()
    session[SESSION_LOGGED_IN] = True
    session[SESSION_USERNAME] = username
    session[SESSION_ROLE] = user.role
    current_app.logger.info(f"User {username} logged in as {user.role}")

    target = url_for(landing)
    if wants_json:
        return jsonify({"success": True, "role": user.role, "redirect": target})
    return redirect(target)


@bp.route('/logout', methods=['GET', 'POST'])
def logout():
    username = session.get(SESSION_USERNAME)
    session.clear()
    if username:
        current_app.logger.info(f"User {username} logged out")
    return redirect(url_for('auth.login'))


@bp.route('/api/session')
def session_info():
    """Server-asserted identity for pages that used to trust sessionStorage."""
    if not is_logged_in():
        return jsonify({"isLoggedIn": False, "username": None, "userRole": None})
    return jsonify({
        "isLoggedIn": True,
        "username": session.get(SESSION_USERNAME),
        "userRole": session.get(SESSION_ROLE),
    })
