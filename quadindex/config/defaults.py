# quadindex/config/defaults.py
"""Built-in settings, overridden section by section from YAML."""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

PATHS = {
    'logs_dir': str(PROJECT_ROOT / 'logs'),
}

QUADTREE = {
    'node_capacity': 4,
    # Leaves this deep stop splitting and hold any number of nodes, which
    # keeps insert recursion bounded when many points coincide
    'max_depth': 32,
}

LOGGING = {
    'level': os.getenv('QUADINDEX_LOG_LEVEL', 'INFO'),
    'console': True,
    'log_file': None,  # relative paths resolve under paths.logs_dir
    'max_file_size': 10 * 1024 * 1024,
    'backup_count': 3,
}
