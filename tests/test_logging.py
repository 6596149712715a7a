import logging

import pytest

from animal_api.app.core.logging_config import setup_logging


@pytest.fixture
def bare_root_logger(monkeypatch):
    """Return a callable that strips the root logger for the test body.

    pytest attaches its capture handlers at the start of each test
    phase, so the reset has to happen inside the test itself.
    """
    root = logging.getLogger()
    installed = []

    def reset():
        monkeypatch.setattr(root, "handlers", installed)
        monkeypatch.setattr(root, "level", root.level)
        pymongo_logger = logging.getLogger("pymongo")
        monkeypatch.setattr(pymongo_logger, "level", pymongo_logger.level)
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            uvicorn_logger = logging.getLogger(name)
            monkeypatch.setattr(uvicorn_logger, "handlers", list(uvicorn_logger.handlers))
            monkeypatch.setattr(uvicorn_logger, "propagate", uvicorn_logger.propagate)
        return root

    yield reset
    for handler in installed:
        handler.close()


def test_setup_logging_writes_to_logfile(bare_root_logger, tmp_path):
    root = bare_root_logger()
    logfile = tmp_path / "api.log"
    setup_logging("debug", logfile=str(logfile), mongo_level="WARNING")

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert logging.getLogger("pymongo").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").propagate is True

    logging.getLogger("animal_api.test").info("Created dog %s", "abc")
    for handler in root.handlers:
        handler.flush()
    assert "[INFO] animal_api.test: Created dog abc" in logfile.read_text(encoding="utf-8")


def test_setup_logging_runs_once(bare_root_logger):
    root = bare_root_logger()
    setup_logging("INFO")
    setup_logging("DEBUG")
    assert len(root.handlers) == 1
    assert root.level == logging.INFO
