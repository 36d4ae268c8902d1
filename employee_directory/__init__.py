"""
Application factory for the Employee Directory service.

Usage::

    from employee_directory import create_app
    app = create_app()           # Uses FLASK_ENV to pick config.
    app = create_app("testing")  # Explicit config for tests.
"""

import logging
import os

from flask import Flask
from werkzeug.exceptions import HTTPException, InternalServerError

from .config import config_by_name
from .extensions import db, migrate

logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', or 'production'.
                     Defaults to the FLASK_ENV environment variable,
                     falling back to 'development'.

    Returns:
        A fully configured Flask application instance.
    """
    # Resolve the configuration class.
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    config_class = config_by_name.get(config_name)
    if config_class is None:
        raise ValueError(
            f"Unknown config '{config_name}'. "
            f"Valid options: {list(config_by_name.keys())}"
        )

    app = Flask(__name__)
    app.config.from_object(config_class)

    if config_name == "production":
        config_class.validate_production_secrets(app.config)

    # -- Configure logging -------------------------------------------------
    _configure_logging(app)

    # -- Initialize extensions ---------------------------------------------
    _register_extensions(app)

    # -- Register blueprints -----------------------------------------------
    _register_blueprints(app)

    # -- Register error handlers -------------------------------------------
    _register_error_handlers(app)

    # -- Register custom CLI commands --------------------------------------
    _register_cli_commands(app)

    return app


def _register_extensions(app: Flask) -> None:
    """Bind all Flask extensions to the application instance."""
    db.init_app(app)
    migrate.init_app(app, db)

    # Imported here so Flask-Migrate sees every model on ``db.metadata``.
    from . import models  # noqa: F401  pylint: disable=import-outside-toplevel


def _register_blueprints(app: Flask) -> None:
    """
    Import and register each blueprint with its URL prefix.

    Blueprints are imported inside this function to avoid circular
    imports — models and services can safely import ``db`` from
    extensions at module level.
    """
    # pylint: disable=import-outside-toplevel

    # Main blueprint — health check at /health.
    from .blueprints.main import bp as main_bp

    app.register_blueprint(main_bp)

    # Employee API — CRUD and aggregations.
    from .blueprints.employee import bp as employee_bp

    app.register_blueprint(employee_bp, url_prefix=app.config["API_PREFIX"])


def _register_error_handlers(app: Flask) -> None:
    """Render every HTTP error as a JSON body instead of HTML."""

    @app.errorhandler(HTTPException)
    def http_error(error):
        """Handle 4xx/5xx raised through ``abort()`` or routing."""
        return {"error": error.name, "message": error.description}, error.code

    @app.errorhandler(InternalServerError)
    def internal_error(error):
        """Handle 500 Internal Server Error."""
        db.session.rollback()
        logger.error("Unhandled error: %s", error.original_exception or error)
        return {
            "error": "Internal Server Error",
            "message": "An unexpected error occurred.",
        }, 500


def _register_cli_commands(app: Flask) -> None:
    """Register custom Flask CLI commands (e.g., flask db-check)."""
    from .cli import register_commands  # pylint: disable=import-outside-toplevel

    register_commands(app)


def _configure_logging(app: Flask) -> None:
    """
    Set the log level from ``LOG_LEVEL``.

    In development the SQLAlchemy engine logger is quieted so SQL echo
    does not drown out application messages.
    """
    log_level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if app.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
