"""
Employee blueprint — JSON CRUD and aggregation endpoints.

Mounted under ``API_PREFIX`` (``/api/v1/employee`` by default).
"""

from flask import Blueprint

bp = Blueprint("employee", __name__)

# Import routes after blueprint creation to avoid circular imports.
from employee_directory.blueprints.employee import routes  # noqa: E402, F401
