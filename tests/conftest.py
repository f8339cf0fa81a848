"""Shared fixtures for spatial index tests."""

import logging
import pytest
import tempfile
from pathlib import Path
import yaml
import shutil

from quadindex import BoundingBox, Node, Point, Quadtree


@pytest.fixture
def test_data_dir():
    """Create a temporary directory for test data."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def test_config_file(test_data_dir):
    """Create a real test config file."""
    config_data = {
        'quadtree': {
            'node_capacity': 2,
            'max_depth': 6
        },
        'logging': {
            'level': 'DEBUG',
            'console': False,
            'log_file': 'quadindex_test.log'
        },
        'paths': {
            'logs_dir': str(test_data_dir / 'logs')
        }
    }

    config_path = test_data_dir / "test_config.yml"
    with open(config_path, 'w') as f:
        yaml.dump(config_data, f)

    return config_path


@pytest.fixture
def root_region():
    """The 100x100 region anchored at the origin."""
    return BoundingBox(Point(0, 0), Point(100, 100))


@pytest.fixture
def tree(root_region):
    """Empty tree with the standard capacity of four."""
    return Quadtree(root_region, node_capacity=4)


@pytest.fixture
def diagonal_nodes():
    """Five nodes along the diagonal of the top-left quadrant."""
    return [Node(Point(i, i), occupied_confidence=i * 10) for i in range(1, 6)]


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after a test reconfigures them."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
