import logging

LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG
}


logger = logging.getLogger('couchview')
request_logger = logging.getLogger('couchview.request')


def set_logging(level, handler=None):
    """
    Set level of logging, and choose where to display/save logs
    (file or standard output).
    """
    if not handler:
        handler = logging.StreamHandler()

    loglevel = LOG_LEVELS.get(level, logging.INFO)
    logger.setLevel(loglevel)
    format = r"%(asctime)s [%(process)d] [%(levelname)s] %(message)s"
    datefmt = r"%Y-%m-%d %H:%M:%S"

    handler.setFormatter(logging.Formatter(format, datefmt))
    logger.addHandler(handler)


def log_request(method, url, status_code, duration):
    """Log request metrics to the `couchview.request` logger.

    The metrics are also attached to the log record as extras:

    - method
    - path
    - status_code
    - duration
    """
    info = {
        "method": method,
        "path": str(url),
        "status_code": status_code,
        "duration": duration,
    }
    request_logger.debug(
        '%(method)s to %(path)s took %(duration)s',
        info,
        extra=info,
    )
