import logging
import logging.config
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "nfa2dfa"


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None, enable_console: bool = True) -> None:
    """
    Настройка логирования конвертера.

    Args:
        log_level: уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: необязательный путь к файлу журнала
        enable_console: писать ли журнал в stderr
    """
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'detailed': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'simple': {
                'format': '%(levelname)s - %(name)s - %(message)s'
            }
        },
        'handlers': {},
        'loggers': {
            ROOT_LOGGER: {
                'level': log_level,
                'handlers': [],
                'propagate': False
            }
        }
    }

    if enable_console:
        config['handlers']['console'] = {
            'class': 'logging.StreamHandler',
            'level': log_level,
            'formatter': 'simple',
            'stream': 'ext://sys.stderr'
        }
        config['loggers'][ROOT_LOGGER]['handlers'].append('console')

    if log_file:
        config['handlers']['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': 'DEBUG',
            'formatter': 'detailed',
            'filename': log_file,
            'maxBytes': 1048576,  # 1MB
            'backupCount': 3,
            'encoding': 'utf8'
        }
        config['loggers'][ROOT_LOGGER]['handlers'].append('file')

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
