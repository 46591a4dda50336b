import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from showfinder.config import LOG_DIR, LOG_LEVEL

def setup_logging(log_dir=LOG_DIR, level=LOG_LEVEL):
    # Set global log level
    logging.basicConfig(encoding='utf-8', level=level)

    # Silence specific libraries
    logging.getLogger('aiohttp.access').setLevel(logging.WARN)

    try:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, mode=0o770, exist_ok=True)
        log_file = log_path / 'showfinder.log'

        # lifespan can run more than once per process, reuse the handler
        for handler in logging.root.handlers:
            if isinstance(handler, TimedRotatingFileHandler) and handler.baseFilename == os.path.abspath(log_file):
                return handler

        file_handler = TimedRotatingFileHandler(
            str(log_file),
            when='midnight',
            interval=7,
            backupCount=12,
            encoding='utf-8'
        )

        formatter = logging.Formatter(
            '%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s',
            datefmt='%d-%b-%Y %H:%M:%S'
        )
        file_handler.setFormatter(formatter)
        logging.root.addHandler(file_handler)
        return file_handler

    except OSError as err:
        logging.error(f"can't open log: {err}")
        return None
