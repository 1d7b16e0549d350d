# tests/conftest.py
import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_module_log_levels():
    """Undo per-module levels applied by ``configure_logging``."""

    yield
    for name in ("grid_astar.search.astar", "grid_astar.search.frontier"):
        logging.getLogger(name).setLevel(logging.NOTSET)
