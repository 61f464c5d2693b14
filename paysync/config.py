# paysync/config.py

import os
import logging
import logging.config

# --- Storage Configuration ---
BASE_DIR = os.path.join(os.path.expanduser("~"), ".paysync")
DATA_DIR = os.environ.get("PAYSYNC_DATA_DIR", BASE_DIR)
DB_NAME = "paysync_data.db"
DATABASE_PATH = os.path.join(DATA_DIR, DB_NAME)

# --- Logging Configuration ---
LOGS_DIR = os.path.join(DATA_DIR, "logs")
LOG_FILE_NAME = "app.log"
LOG_FILE_PATH = os.path.join(LOGS_DIR, LOG_FILE_NAME)

LOG_LEVEL = getattr(logging, os.environ.get("PAYSYNC_LOG_LEVEL", "DEBUG").upper(), logging.DEBUG)
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s'

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': LOG_FORMAT,
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'level': LOG_LEVEL,
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'standard',
            'filename': LOG_FILE_PATH,
            'maxBytes': 1024*1024*5,  # 5 MB
            'backupCount': 5,
            'level': logging.INFO,
            'encoding': 'utf-8',
        },
    },
    'root': {
        'handlers': ['console', 'file'],
        'level': LOG_LEVEL,
    },
}

# --- Application Settings ---
APP_NAME = "PaySync"
CURRENCY_SYMBOL = "$"


def ensure_app_directories() -> None:
    """Creates the data and logs directories if they don't exist."""
    for directory in (DATA_DIR, LOGS_DIR):
        if not os.path.exists(directory):
            os.makedirs(directory)


def configure_logging() -> None:
    ensure_app_directories()
    logging.config.dictConfig(LOGGING_CONFIG)
