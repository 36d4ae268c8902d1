"""
Request-validation decorators for JSON routes.

    @bp.route("/save", methods=["POST"])
    @json_body_required
    def save_employee():
        payload = request.get_json()
        ...
"""

import logging
from functools import wraps

from flask import abort, request

logger = logging.getLogger(__name__)


def json_body_required(func):
    """
    Reject requests whose body is not a JSON object with HTTP 400.

    The decoded object is available to the view through
    ``request.get_json()``.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            logger.warning(
                "Rejected %s %s: body is not a JSON object",
                request.method,
                request.path,
            )
            abort(400, description="Request body must be a JSON object.")
        return func(*args, **kwargs)

    return wrapper
