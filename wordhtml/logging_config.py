from __future__ import annotations

"""Central logging configuration for Word Html Toolkit.

Import and call :func:`setup_logging` at application start-up.
"""

import logging
import logging.config
import os

from wordhtml.config import ConfigManager

__all__ = ["setup_logging"]


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application using configuration from YAML files."""
    log_dir = os.environ.get("WORDHTML_LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "app.log")

    try:
        logging_config = ConfigManager().get_logging_config()

        if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
            # Update the filename dynamically
            if "handlers" in logging_config and "file" in logging_config["handlers"]:
                logging_config["handlers"]["file"]["filename"] = log_file

            logging.config.dictConfig(logging_config)
            logging.getLogger("wordhtml").debug("===== Logging initialised from config files =====")
        else:
            _setup_minimal_logging()
    except (ValueError, TypeError, AttributeError, ImportError, OSError) as exc:
        # dictConfig reports every configuration problem through these
        print(f"Error loading logging config: {exc}")
        _setup_minimal_logging()

    targets = ["wordhtml"] if verbose else []
    extra_modules = os.environ.get("WORDHTML_DEBUG_MODULES", "").strip()
    if extra_modules:
        targets.extend(m.strip() for m in extra_modules.split(",") if m.strip())
    _apply_debug_overrides(targets)


def _setup_minimal_logging() -> None:
    """Set up minimal console-only logging when config is unavailable."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'WARNING',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }

    logging.config.dictConfig(minimal_config)
    logging.warning("===== Logging initialised with minimal fallback =====")


def _apply_debug_overrides(targets: list[str]) -> None:
    """Raise the listed loggers to DEBUG and make sure something prints it."""
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        consoles = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        for h in consoles:
            h.setLevel(logging.DEBUG)
        if not consoles:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            logger.addHandler(h)
        logger.debug("Debug override active for logger '%s'", name)
