import logging
import os
from typing import Any, Dict, Optional

from flask import Flask

from clinic.core.api_utils import api_response
from clinic.core.config import (
    get_bool_env,
    get_clinic_credentials,
    get_log_dir,
    get_log_level,
    load_environment,
    log_startup_config,
)
from clinic.core.exceptions import (
    ClinicError,
    DuplicateKeyError,
    InsufficientQuantityError,
    NotFoundError,
    ValidationError,
)
from clinic.core.logging_config import setup_logging
from clinic.services.context import ClinicContext

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Map core failures onto the standard response envelope."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        return api_response(False, error.message, {"field": error.field}, 400)

    @app.errorhandler(NotFoundError)
    def handle_not_found(error: NotFoundError):
        return api_response(False, error.message, None, 404)

    @app.errorhandler(InsufficientQuantityError)
    def handle_insufficient_quantity(error: InsufficientQuantityError):
        return api_response(
            False,
            error.message,
            {"requested": error.requested, "available": error.available},
            409,
        )

    @app.errorhandler(DuplicateKeyError)
    def handle_duplicate_key(error: DuplicateKeyError):
        logger.error(
            "Identifier invariant violated",
            extra={"context": {"entity": error.entity_name, "key": error.key}},
            exc_info=error,
        )
        return api_response(False, "Internal error", None, 500)

    @app.errorhandler(ClinicError)
    def handle_clinic_error(error: ClinicError):
        return api_response(False, error.message, None, 400)


def create_app(
    config: Optional[Dict[str, Any]] = None, context: Optional[ClinicContext] = None
) -> Flask:
    """
    Build the Flask adapter around a ClinicContext.

    Args:
        config: Overrides applied after environment configuration
        context: Existing clinic state to serve (a fresh one by default)
    """
    load_environment()

    app = Flask(__name__)
    app.config["CLINIC_CREDENTIALS"] = get_clinic_credentials()
    app.config["TESTING"] = get_bool_env("TESTING", False)
    if config:
        app.config.update(config)

    if not app.config["TESTING"]:
        setup_logging(
            app,
            log_level=get_log_level(),
            log_to_file=get_bool_env("LOG_TO_FILE", False),
            use_json_format=get_bool_env("LOG_JSON", False),
            log_dir=get_log_dir(),
        )

    app.extensions["clinic"] = context or ClinicContext()

    from clinic.controllers.appointment_controller import appointment_bp
    from clinic.controllers.billing_controller import billing_bp
    from clinic.controllers.ehr_controller import ehr_bp
    from clinic.controllers.health_controller import health_bp
    from clinic.controllers.inventory_controller import inventory_bp
    from clinic.controllers.patient_controller import patient_bp
    from clinic.controllers.staff_controller import staff_bp

    for blueprint in (
        patient_bp,
        appointment_bp,
        ehr_bp,
        billing_bp,
        inventory_bp,
        staff_bp,
        health_bp,
    ):
        app.register_blueprint(blueprint)

    register_error_handlers(app)
    log_startup_config(bool(app.config["CLINIC_CREDENTIALS"]))

    return app


def main() -> None:
    app = create_app()
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "5000"))
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
