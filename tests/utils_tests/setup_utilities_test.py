import logging
import os

import pytest

import coaltime as ct
from coaltime import setup_utilities
from coaltime.constants import DEFAULT_ROOT_FINDING_PARAMETERS
from coaltime.mixins import UnspecifiedConfigParameterError, logger


@pytest.fixture
def restore_logger():
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_parse_config_defaults():
    parameters = setup_utilities.parse_config("[dating]\nmutation_rate = 2.5e-8\n")

    assert parameters["dating"]["mutation_rate"] == 2.5e-8
    assert parameters["dating"]["verbose"] is False
    assert parameters["root_finding"] == DEFAULT_ROOT_FINDING_PARAMETERS


def test_parse_config_overrides():
    config = """
[dating]
mutation_rate = 0.001
verbose = True

[root_finding]
maxiter = 200
"""
    parameters = ct.parse_config(config)
    assert parameters["dating"]["verbose"] is True
    assert parameters["root_finding"]["maxiter"] == 200
    assert parameters["root_finding"]["xtol"] == DEFAULT_ROOT_FINDING_PARAMETERS["xtol"]

    estimate = ct.tl.estimate_time(
        100,
        5,
        parameters["dating"]["mutation_rate"],
        root_finding=parameters["root_finding"],
    )
    assert estimate == ct.tl.estimate_time(100, 5, 0.001)


def test_parse_config_requires_mutation_rate():
    with pytest.raises(UnspecifiedConfigParameterError):
        setup_utilities.parse_config("[root_finding]\nmaxiter = 10\n")


def test_setup_creates_log_files(tmp_path, restore_logger):
    output_directory = str(tmp_path / "dating")
    setup_utilities.setup(output_directory, verbose=True)

    assert os.path.isfile(os.path.join(output_directory, "coaltime.log"))
    assert os.path.isfile(os.path.join(output_directory, "coaltime.err"))
    assert logger.level == logging.DEBUG

    ct.tl.estimate_time(100, 5, 0.001)
    for handler in logger.handlers:
        handler.flush()
    with open(os.path.join(output_directory, "coaltime.log")) as f:
        assert "N=100, K=5" in f.read()
