# logging_setup.py
import logging
import os
import sys
from datetime import datetime
from config import LOG_LEVEL, LOG_DIR, LOG_FILE

# Chatty below WARNING on every page fetch/parse
QUIET_LOGGERS = ('urllib3', 'charset_normalizer', 'bs4')

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose=False, log_dir=None):
    """
    Configure logging for the command-line driver

    The scrapers and processors only create loggers; this is called from
    main.py and nowhere else. Console output goes to stderr so that
    `--json` output on stdout stays parseable.

    Args:
        verbose (bool): DEBUG level, e.g. to see skipped JSON-LD blocks
        log_dir (str): Also write a timestamped log file there
            (defaults to LOG_DIR; no file when neither is set)

    Returns:
        logging.Logger: The scrapers package logger
    """
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    handlers = [logging.StreamHandler(sys.stderr)]

    log_dir = log_dir or LOG_DIR
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        handlers.append(logging.FileHandler(os.path.join(log_dir, f"{timestamp}_{LOG_FILE}"), encoding='utf-8'))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger('scrapers')
