"""
HTTP controllers. Each blueprint is a thin adapter: it reads primitive input
from the request, calls one domain operation and renders the result.
"""

from flask import current_app

from clinic.services.context import ClinicContext


def get_clinic() -> ClinicContext:
    """Return the ClinicContext attached to the running application."""
    return current_app.extensions["clinic"]
