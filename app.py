from flask import Flask
from dotenv import load_dotenv
from werkzeug.middleware.proxy_fix import ProxyFix
from typing import Any, Dict, Optional
from constants import FORM_METHODS, METHOD_POST
from error_handler import validate_environment_variable
from logging_helper import LoggingHelper, LogType

load_dotenv()

# Get logger instances
logger = LoggingHelper.get_logger(LogType.MAIN)
from routes.example_routes import bp as examples_bp


def _valid_port(port: int) -> bool:
    return 0 < port < 65536


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Create the Flask application serving the example data form pages.

    Args:
        config: Optional settings applied over the environment defaults
            (tests pass ``{'TESTING': True}``)

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    # ============================================================================
    # FLASK CONFIGURATION
    # ============================================================================

    app.config['DATA_TABLE_FORM_METHOD'] = validate_environment_variable(
        'DATA_TABLE_FORM_METHOD',
        default=METHOD_POST,
        validator=lambda method: method in FORM_METHODS,
        converter=lambda value: value.strip().lower()
    )
    if config:
        app.config.update(config)

    # Configure Flask to work behind a reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    # ============================================================================
    # BLUEPRINT REGISTRATION
    # ============================================================================

    app.register_blueprint(examples_bp)
    LoggingHelper.log_operation("example pages registration", "completed")

    logger.debug(f"Application created (form method: {app.config['DATA_TABLE_FORM_METHOD']})")
    return app


app = create_app()

# Only run the development server if executed directly (not via WSGI)
if __name__ == '__main__':
    # Bind to localhost by default for security
    host = validate_environment_variable('HOST', '127.0.0.1')
    port = validate_environment_variable('PORT', 21812, validator=_valid_port, converter=int)

    # Security warning if binding to all interfaces
    if host == '0.0.0.0':
        logger.warning("Binding to 0.0.0.0 exposes the examples to the network. Use 127.0.0.1 instead.")

    logger.info(f"Starting Flask development server on {host}:{port}")
    logger.warning("Using Flask development server. For production, use a WSGI server like Gunicorn.")

    try:
        app.run(host=host, port=port, debug=False, threaded=True)
    except Exception as e:
        LoggingHelper.log_error_with_trace("Flask failed to start", e)
        raise
