"""
Common API utilities for consistent response formatting across all controllers.
"""

import hmac
from functools import wraps
from typing import Any, Optional

from flask import current_app, jsonify, request

from clinic.core.exceptions import ValidationError


def api_response(
    success: bool, message: str, data: Optional[Any] = None, status_code: int = 200
) -> tuple:
    """
    Standardized API response format for all endpoints.

    Args:
        success: Whether the operation was successful
        message: Human-readable message about the operation
        data: Optional data payload
        status_code: HTTP status code

    Returns:
        Tuple of (json_response, status_code)
    """
    response = {"success": success, "message": message}

    if data is not None:
        response["data"] = data

    return jsonify(response), status_code


def credentials_match(username: Optional[str], password: Optional[str]) -> bool:
    """Compare against the configured fixed credential in constant time."""
    expected = current_app.config.get("CLINIC_CREDENTIALS")
    if not expected:
        return True
    if username is None or password is None:
        return False
    expected_user, expected_password = expected
    return hmac.compare_digest(
        username.encode("utf-8"), expected_user.encode("utf-8")
    ) and hmac.compare_digest(
        password.encode("utf-8"), expected_password.encode("utf-8")
    )


def require_credentials(f):
    """
    Decorator requiring the fixed clinic credential via HTTP Basic auth.

    No-op when CLINIC_CREDENTIALS is not configured.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth = request.authorization
        username = auth.username if auth else None
        password = auth.password if auth else None
        if not credentials_match(username, password):
            response, status = api_response(False, "Invalid credentials", None, 401)
            response.headers["WWW-Authenticate"] = 'Basic realm="clinic"'
            return response, status
        return f(*args, **kwargs)

    return decorated_function


def get_payload() -> dict:
    """Return the request body as a dict, accepting JSON or form data."""
    if not request.is_json:
        return request.form.to_dict()

    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")
    return data
