"""
idcn Server Entry Point

Run with: python -m idcn.main
Or: uvicorn idcn.api.routes:app --reload
"""

import os
import sys

import uvicorn

from idcn import __version__
from idcn.config.gazetteer_loader import load_gazetteer_from_yaml_safe
from idcn.config.settings import get_gazetteer_path, get_generator_seed
from idcn.logging.setup import get_logger, setup_logging

# Initialize logging early
setup_logging()
logger = get_logger(__name__)


def validate_environment() -> list[str]:
    """Validate environment variables at startup.

    Returns:
        List of validation error messages (empty if all valid).
    """
    errors = []

    port_str = os.getenv("IDCN_PORT", "8000")
    try:
        port = int(port_str)
        if not (1 <= port <= 65535):
            errors.append(f"IDCN_PORT must be between 1 and 65535, got: {port}")
    except ValueError:
        errors.append(f"IDCN_PORT must be an integer, got: {port_str}")

    valid_log_levels = {"debug", "info", "warning", "error", "critical"}
    log_level = os.getenv("IDCN_LOG_LEVEL", "info").lower()
    if log_level not in valid_log_levels:
        errors.append(f"IDCN_LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}")

    try:
        get_generator_seed()
    except ValueError as e:
        errors.append(str(e))

    _, gazetteer_error = load_gazetteer_from_yaml_safe(get_gazetteer_path())
    if gazetteer_error:
        errors.append(f"Gazetteer could not be loaded: {gazetteer_error}")

    return errors


def main():
    """Run the idcn server."""
    validation_errors = validate_environment()
    if validation_errors:
        for error in validation_errors:
            logger.error(error, extra={"event": "config_error"})
        print("\nConfiguration errors detected:", file=sys.stderr)
        for error in validation_errors:
            print(f"  - {error}", file=sys.stderr)
        print("\nPlease fix the above errors and restart.", file=sys.stderr)
        sys.exit(1)

    host = os.getenv("IDCN_HOST", "0.0.0.0")
    port = int(os.getenv("IDCN_PORT", "8000"))
    reload = os.getenv("IDCN_RELOAD", "false").lower() == "true"
    log_level = os.getenv("IDCN_LOG_LEVEL", "info").lower()

    logger.info(
        "Starting idcn server",
        extra={
            "event": "server_starting",
            "host": host,
            "port": port,
            "version": __version__,
        },
    )

    uvicorn.run(
        "idcn.api.routes:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
