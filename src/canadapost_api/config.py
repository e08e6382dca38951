import logging
import os

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_LANGUAGE = 'en-CA'


def set_logger_level(logger):
    log_level = os.environ.get('LOG_LEVEL', 'info').upper()
    log_level_number = getattr(logging, log_level, None)
    if not isinstance(log_level_number, int):
        LOGGER.info('LOG_LEVEL passed is invalid, default to INFO.')
        log_level_number = getattr(logging, 'INFO', None)
    logger.setLevel(log_level_number)


def get_timeout() -> float:
    value = os.environ.get('CANADAPOST_TIMEOUT')
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        LOGGER.warning(f'CANADAPOST_TIMEOUT passed is invalid ({value}), default to {DEFAULT_TIMEOUT}.')
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        LOGGER.warning(f'CANADAPOST_TIMEOUT must be positive ({value}), default to {DEFAULT_TIMEOUT}.')
        return DEFAULT_TIMEOUT
    return timeout


CANADAPOST_TIMEOUT = get_timeout()
CANADAPOST_LANGUAGE = os.environ.get('CANADAPOST_LANGUAGE') or DEFAULT_LANGUAGE
