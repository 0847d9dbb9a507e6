import logging

import pytest

from json_to_class.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by the CLI so caplog keeps seeing records."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def write_json(tmp_path):
    """Write text to a JSON file under tmp_path and return its path."""

    def _write(text, name="data.json"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
