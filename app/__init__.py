from flask import Flask
from config import Config
from app.services.backend_client import BackendClient
from app.services.dashboard_service import DashboardController
from app.utils.logging_config import setup_logging


def create_app(config_class=Config, overrides=None, backend_session=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)
    app.config['BACKEND_URL'] = app.config['BACKEND_URL'].rstrip('/')

    setup_logging('edmin', level=app.config.get('LOG_LEVEL', 'INFO'), log_file=app.config.get('LOG_FILE'))

    client = BackendClient.from_config(app.config, session=backend_session)
    app.extensions['dashboard'] = DashboardController(client)

    with app.app_context():
        from app.routes import dashboard

        # Register blueprints
        app.register_blueprint(dashboard.bp)

        # Register error handlers
        register_error_handlers(app)

    app.logger.info(f"EDmin dashboard using backend {app.config['BACKEND_URL']}")
    return app


def register_error_handlers(app):
    """Register global error handlers"""
    from flask import render_template
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        return render_template('errors/500.html'), 500

    @app.errorhandler(Exception)
    def handle_exception(e):
        # HTTP errors other than 404/500 (405, 400, ...) keep their own response
        if isinstance(e, HTTPException):
            return e

        app.logger.exception(f'Unhandled exception: {str(e)}')
        return render_template('errors/500.html'), 500
