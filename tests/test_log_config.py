# tests/test_log_config.py
import logging
import sys

import pytest

from physconst_core import ConstantCatalog
from physconst_core.log_config import LOG_LEVEL_ENV_VAR, set_package_log_level, setup_logging

from tests.conftest import BOHR_RADIUS, RecordingConverter


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_installs_single_stdout_handler(restore_root_logger):
    setup_logging(logging.WARNING)
    setup_logging(logging.WARNING)
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stdout
    assert restore_root_logger.level == logging.WARNING


@pytest.mark.parametrize("env_value, expected", [("debug", logging.DEBUG), ("nonsense", logging.INFO)])
def test_setup_logging_reads_environment(restore_root_logger, monkeypatch, env_value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, env_value)
    setup_logging()
    assert restore_root_logger.level == expected


def test_package_level_leaves_root_alone(restore_root_logger):
    root_level = restore_root_logger.level
    assert set_package_log_level("error") == logging.ERROR
    assert logging.getLogger("physconst_core").level == logging.ERROR
    assert restore_root_logger.level == root_level
    set_package_log_level(logging.NOTSET)


def test_find_trace_is_debug_unless_verbose(small_catalog, caplog):
    with caplog.at_level(logging.DEBUG, logger="physconst_core"):
        small_catalog.find("c", "furlong")
    conversion_records = [r for r in caplog.records if "Trying to convert" in r.getMessage()]
    assert conversion_records
    assert all(r.levelno == logging.DEBUG for r in conversion_records)

    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="physconst_core"):
        small_catalog.find("c", "furlong", verbose=1)
    levels = {r.levelno for r in caplog.records if "Trying to convert" in r.getMessage()}
    assert levels == {logging.INFO}
    exact_pass_levels = {r.levelno for r in caplog.records if "Exact pass" in r.getMessage()}
    assert exact_pass_levels == {logging.DEBUG}


def test_per_alias_trace_needs_highest_verbosity(caplog):
    catalog = ConstantCatalog(converter=RecordingConverter(), entries=[BOHR_RADIUS])
    with caplog.at_level(logging.INFO, logger="physconst_core"):
        catalog.find("rbohr", "m", verbose=3)
    assert any("alias 'rbohr'" in r.getMessage() for r in caplog.records)
