"""
dashboard.py
------------
Dashboard pages shown after login. The stats panel is a placeholder filled
with zeros from config until real inventory aggregates exist.
"""

from flask import Blueprint, current_app, render_template, session

from supply_web.auth import SESSION_ROLE, SESSION_USERNAME, login_required, require_role

bp = Blueprint('dashboard', __name__)


def display_name(username):
    """First letter upper-cased, rest untouched ("john" -> "John")."""
    name = username or 'Admin'
    return name[:1].upper() + name[1:]


def placeholder_stats():
    stats = dict(current_app.config['DASHBOARD_PLACEHOLDER_STATS'])
    stats['totalValue'] = f"${stats['totalValue']}"
    return stats


def _render(title):
    return render_template(
        'dashboard.html',
        title=title,
        welcome_message=f"Welcome, {display_name(session.get(SESSION_USERNAME))}!",
        role=session.get(SESSION_ROLE),
        stats=placeholder_stats(),
    )


@bp.route('/dashboard')
@login_required
def dashboard():
    return _render("Dashboard")


@bp.route('/supervisor-dashboard')
@require_role('admin', 'supervisor')
def supervisor_dashboard():
    return _render("Supervisor Dashboard")


@bp.route('/staff-dashboard')
@login_required
def staff_dashboard():
    return _render("Staff Dashboard")
