"""Root logger configuration driven by the ``logging`` config section."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'


def setup_logging(config, level: Optional[str] = None) -> logging.Logger:
    """Replace the root logger's handlers according to ``config``.

    Args:
        config: Config instance (anything with a dot-notation ``get``)
        level: Overrides ``logging.level``

    Returns:
        The configured root logger
    """
    level_name = str(level or config.get('logging.level', 'INFO')).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    if config.get('logging.console', True):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)

    log_file = config.get('logging.log_file')
    if log_file:
        path = Path(log_file)
        if not path.is_absolute():
            path = Path(config.get('paths.logs_dir', 'logs')) / path
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=config.get('logging.max_file_size', 10 * 1024 * 1024),
            backupCount=config.get('logging.backup_count', 3),
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root
