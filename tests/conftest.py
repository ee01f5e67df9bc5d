import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo process-wide logging changes (e.g. CLI --log-level) between tests."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
