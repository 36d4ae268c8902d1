"""
Application configuration classes.

Each class represents a deployment environment. The factory function
``create_app`` in ``employee_directory/__init__.py`` selects the
appropriate config based on the FLASK_ENV environment variable.

The default database is a local SQLite file so the service runs with
no external setup.  Point ``DATABASE_URL`` at any SQLAlchemy URL
(PostgreSQL, MySQL, SQL Server) for a real deployment.
"""

import logging
import os

# Module-level logger for startup warnings emitted by config classes.
_logger = logging.getLogger(__name__)

# Sentinel for detecting an unset SECRET_KEY in production.
_DEFAULT_SECRET_KEY = "dev-secret-change-me"


class BaseConfig:
    """
    Shared configuration values inherited by all environments.

    Secrets and connection strings are loaded from environment variables
    so they never appear in source control.
    """

    # -- Flask core --------------------------------------------------------
    SECRET_KEY: str = os.environ.get("SECRET_KEY", _DEFAULT_SECRET_KEY)

    # -- SQLAlchemy --------------------------------------------------------
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL", "sqlite:///employee_directory.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Echo SQL statements to the log for debugging (override per env).
    SQLALCHEMY_ECHO: bool = False

    # -- HTTP API ----------------------------------------------------------
    # URL prefix for the employee blueprint.
    API_PREFIX: str = os.environ.get("API_PREFIX", "/api/v1/employee")

    # -- Logging -----------------------------------------------------------
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def validate_production_secrets(cls, app_config: dict) -> None:
        """
        Verify that required settings are safe for production.

        Called by ``create_app()`` when ``config_name == 'production'``.

        Args:
            app_config: The ``app.config`` dict after loading the
                        config class.

        Raises:
            RuntimeError: If SECRET_KEY is still the insecure default.
        """
        if app_config.get("SECRET_KEY") == _DEFAULT_SECRET_KEY:
            raise RuntimeError(
                "SECRET_KEY must be set to a secure random value in production."
            )

        # SQLite works, but is a single-writer file database.
        if app_config.get("SQLALCHEMY_DATABASE_URI", "").startswith("sqlite"):
            _logger.warning(
                "DATABASE_URL points at SQLite in production. "
                "Concurrent writes will serialize on the database file."
            )

        if app_config.get("LOG_LEVEL", "").upper() == "DEBUG":
            _logger.warning(
                "LOG_LEVEL=DEBUG is not recommended in production. "
                "Consider INFO or WARNING."
            )


class DevelopmentConfig(BaseConfig):
    """Development environment: verbose logging, SQL echo enabled."""

    DEBUG: bool = True
    SQLALCHEMY_ECHO: bool = True
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """
    Testing environment: in-memory SQLite unless TEST_DATABASE_URL is set.

    The schema is created by the test fixtures with ``db.create_all()``.
    """

    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL", "sqlite:///:memory:"
    )
    LOG_LEVEL: str = "DEBUG"


class ProductionConfig(BaseConfig):
    """
    Production environment: strict settings, no debug output.

    The application factory calls ``validate_production_secrets()`` at
    startup and refuses to launch with the default secret key.
    """

    DEBUG: bool = False
    SQLALCHEMY_ECHO: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING")


# Lookup dict used by the application factory.
config_by_name: dict[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
