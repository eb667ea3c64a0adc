"""
Log Handlers

This module contains utility functions to set up logging
consistently
"""
import logging


def resolve_level(level, default=logging.INFO) -> int:
    """Turns a level name or number into a logging level, or the default"""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def init_logging(app, logger_name: str):
    """Set up logging for production"""
    app.logger.propagate = False
    gunicorn_logger = logging.getLogger(logger_name)
    app.logger.handlers = gunicorn_logger.handlers
    configured = app.config.get("LOG_LEVEL", gunicorn_logger.level)
    app.logger.setLevel(resolve_level(configured))
    # Make all log formats consistent
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] [%(module)s] %(message)s", "%Y-%m-%d %H:%M:%S %z"
    )
    for handler in app.logger.handlers:
        handler.setFormatter(formatter)
    if resolve_level(configured, default=None) is None:
        app.logger.warning("Unknown LOG_LEVEL %r, using INFO", configured)
    app.logger.info("Logging handler established")
