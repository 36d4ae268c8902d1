"""
Routes for the main blueprint — health check.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from employee_directory.blueprints.main import bp
from employee_directory.extensions import db

logger = logging.getLogger(__name__)


@bp.route("/health")
def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns 200 if the app is running and can reach the database.
    """
    try:
        db.session.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}, 200
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.warning("Health check failed: %s", exc)
        return {"status": "unhealthy", "database": str(exc)}, 503
