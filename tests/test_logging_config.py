import logging

import pytest

from petclinic.app.core.config import PROJECT_ROOT, resolve_path
from petclinic.app.core.db import get_database_path
from petclinic.app.core.logging_config import CONSOLE_HANDLER, FILE_HANDLER, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    before = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _named(root, name):
    return [h for h in root.handlers if h.get_name() == name]


def test_relative_paths_resolve_under_project_root(tmp_path):
    assert resolve_path("logs/petclinic.log") == PROJECT_ROOT / "logs" / "petclinic.log"
    assert resolve_path(str(tmp_path / "clinic.log")) == (tmp_path / "clinic.log").resolve()
    assert get_database_path("petclinic.db") == str(PROJECT_ROOT / "petclinic.db")


def test_console_only_by_default(root_logger):
    assert setup_logging("warning") is None
    assert root_logger.level == logging.WARNING
    assert len(_named(root_logger, CONSOLE_HANDLER)) == 1
    assert _named(root_logger, FILE_HANDLER) == []


def test_log_file_receives_records(root_logger, tmp_path):
    logfile = tmp_path / "logs" / "clinic.log"

    path = setup_logging("INFO", str(logfile))
    logging.getLogger("petclinic.app.test").info("Created owner 1")
    for handler in _named(root_logger, FILE_HANDLER):
        handler.flush()

    assert path == logfile.resolve()
    assert "[INFO] petclinic.app.test: Created owner 1" in logfile.read_text(encoding="utf-8")


def test_repeated_setup_does_not_duplicate_handlers(root_logger, tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"

    setup_logging("INFO", str(first))
    setup_logging("INFO", str(first))
    assert len(_named(root_logger, CONSOLE_HANDLER)) == 1
    assert len(_named(root_logger, FILE_HANDLER)) == 1

    setup_logging("INFO", str(second))
    (handler,) = _named(root_logger, FILE_HANDLER)
    assert handler.baseFilename == str(second.resolve())
