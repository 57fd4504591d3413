import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# modules that report render progress
RENDER_LOGGERS = ('ray', 'scenes', 'cli')


def setup_logging(level=logging.INFO, log_file=None, log_format=LOG_FORMAT):
    """Send render progress to stderr, and to log_file when given.

    Calling it again replaces the handlers installed by the previous call.
    Pillow's own chatter is held at WARNING.
    """
    formatter = logging.Formatter(log_format)
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    for name in RENDER_LOGGERS:
        logger = logging.getLogger(name)
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        logger.setLevel(level)
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger('PIL').setLevel(logging.WARNING)
    return handlers
