import logging
from pathlib import Path

LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE = LOG_DIR / "app.log"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Cache for log settings to avoid repeated config reads
_log_settings_cache = None


def _get_log_settings():
    """Get (log_mode, log_to_file) from configuration."""
    global _log_settings_cache
    if _log_settings_cache is not None:
        return _log_settings_cache

    from wiktionary_dictionary.config import load_config
    config = load_config()
    _log_settings_cache = (config.get('log_mode', 'off'), bool(config.get('log_to_file', False)))
    return _log_settings_cache


def _levels_for(log_mode: str):
    """Return (logger_level, console_level) for a log mode."""
    if log_mode == 'debug':
        return logging.DEBUG, logging.DEBUG
    if log_mode == 'off':
        # Higher than CRITICAL disables everything
        return logging.CRITICAL + 1, logging.CRITICAL + 1
    return logging.INFO, logging.INFO


def _configure(logger: logging.Logger, log_mode: str, log_to_file: bool):
    """Apply log mode to a logger, adding or removing handlers as needed."""
    log_format = logging.Formatter(LOG_FORMAT)
    logger_level, console_level = _levels_for(log_mode)
    logger.setLevel(logger_level)

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    want_file = log_mode != 'off' and log_to_file

    if want_file and not file_handlers:
        LOG_DIR.mkdir(exist_ok=True)
        f_handler = logging.FileHandler(LOG_FILE)
        f_handler.setLevel(logging.DEBUG)
        f_handler.setFormatter(log_format)
        logger.addHandler(f_handler)
    elif not want_file and file_handlers:
        for handler in file_handlers:
            handler.close()
            logger.removeHandler(handler)

    console_handlers = [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    if not console_handlers:
        c_handler = logging.StreamHandler()
        c_handler.setFormatter(log_format)
        logger.addHandler(c_handler)
        console_handlers = [c_handler]

    for handler in console_handlers:
        handler.setLevel(console_level)


def clear_log_mode_cache():
    """Clear the cached log settings and update all loggers created by get_logger."""
    global _log_settings_cache
    _log_settings_cache = None

    log_mode, log_to_file = _get_log_settings()

    # Only loggers with handlers were created by get_logger
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        logger = logging.getLogger(logger_name)
        if logger.handlers and logger_name.startswith('wiktionary_dictionary'):
            _configure(logger, log_mode, log_to_file)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    log_mode, log_to_file = _get_log_settings()
    _configure(logger, log_mode, log_to_file)
    return logger
