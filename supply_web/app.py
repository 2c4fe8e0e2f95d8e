import logging
import os
from datetime import datetime, timezone

from flask import Flask, jsonify, redirect, request, url_for
from werkzeug.exceptions import HTTPException

from supply_web import auth, dashboard, database, supply_requests
from supply_web import config as app_config
from supply_web.errors import SupplyRequestError


def create_app(overrides=None, user_store=None):
    """Build the Flask app; `overrides` patches config, `user_store` replaces the static table."""
    template_dir = os.path.join(os.path.dirname(__file__), 'templates')
    app = Flask(__name__, template_folder=template_dir)
    app.config.from_object(app_config)
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.INFO))
    app.extensions['user_store'] = user_store or auth.StaticUserStore(app.config['USERS'])

    app.register_blueprint(auth.bp)
    app.register_blueprint(dashboard.bp)
    app.register_blueprint(supply_requests.bp)

    @app.route('/')
    def home():
        return redirect(url_for('auth.login'))

    @app.route('/api/health')
    def health():
        return jsonify({
            "status": "OK",
            "message": "PAU Inventory Management System API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

    @app.errorhandler(HTTPException)
    def api_http_error(e):
        # API callers get JSON, pages keep the default HTML
        if request.path.startswith('/api/'):
            return jsonify({"error": e.description, "code": e.name.lower().replace(' ', '_')}), e.code
        return e

    # Initialize database on startup
    try:
        with app.app_context():
            database.init_db()
            app.logger.info(f"Database initialized at {app.config['DATABASE_PATH']}")
    except SupplyRequestError as e:
        app.logger.error(f"Database initialization error: {e}")

    return app


def main():
    app = create_app()
    app.logger.info(f"PAU Inventory Management System running on http://localhost:{app.config['PORT']}")
    app.run(debug=False, port=app.config['PORT'], threaded=True, use_reloader=False)


# Run the application
if __name__ == '__main__':
    main()
