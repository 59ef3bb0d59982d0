"""Flask application factory."""
import logging
import os
import traceback

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from lettings.database import init_db


def create_app(config_object='config.Config'):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )

    # Sentry error tracking in production
    if app.config.get('SENTRY_DSN') and app.config.get('ENV') == 'production':
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            traces_sample_rate=0.1,
            environment=app.config.get('ENV'),
            release=os.getenv('GIT_COMMIT', 'unknown')
        )

    # Production: Enable ProxyFix behind a reverse proxy
    if app.config.get('ENV') == 'production':
        from werkzeug.middleware.proxy_fix import ProxyFix
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    # Initialize database
    init_db(app)

    # Domain events (Redis pub/sub)
    from lettings.services.event_service import init_events
    init_events(app)

    from lettings.middleware import load_caller_identity

    @app.before_request
    def before_request_handler():
        """Load caller identity for each request."""
        load_caller_identity()

    # Error Handlers
    from lettings.exceptions import LettingsError

    @app.errorhandler(LettingsError)
    def handle_lettings_error(error):
        """Handle custom application exceptions."""
        if error.status_code >= 500:
            app.logger.error(f"LettingsError [{error.status_code}]: {error.message}")
            return jsonify({'status': 'error', 'message': 'An unexpected error occurred'}), error.status_code
        app.logger.info(f"LettingsError [{error.status_code}]: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'status': 'error', 'message': error.name}), error.code

    @app.errorhandler(500)
    @app.errorhandler(Exception)
    def internal_error(error):
        app.logger.error(f"Unhandled Exception: {error}")
        app.logger.error(f"Traceback: {traceback.format_exc()}")
        return jsonify({'status': 'error', 'message': 'Internal Server Error'}), 500

    # Register blueprints
    from lettings.blueprints.main import main_bp
    from lettings.blueprints.properties import properties_bp
    from lettings.blueprints.tenants import tenants_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(properties_bp)
    app.register_blueprint(tenants_bp)

    # Register CLI commands
    from lettings.cli_commands import init_cli_commands
    init_cli_commands(app)

    return app
