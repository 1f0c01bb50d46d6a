"""A file that stores setup utilities for coalescence time estimation.

Configuration is read from INI-formatted strings whose values are Python
literals, for example::

    [dating]
    mutation_rate = 2.5e-8

    [root_finding]
    maxiter = 200

The ``root_finding`` section is passed as the ``root_finding`` argument of
the estimators in :mod:`coaltime.tools`.
"""

import ast
import configparser
import logging
import os
from typing import Any

from coaltime import constants
from coaltime.mixins import UnspecifiedConfigParameterError, logger


def setup(output_directory_location: str, verbose: bool) -> None:
    """
    Setup logging for an estimation run.

    Parameters
    ----------
    output_directory_location
        Directory to create or reuse for log files.
    verbose
        Whether to enable verbose logging output.

    Returns
    -------
    None - Configures logging handlers and the output directory.
    """
    if not os.path.isdir(output_directory_location):
        os.mkdir(output_directory_location)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    output_handler = logging.FileHandler(os.path.join(output_directory_location, "coaltime.log"))
    output_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.addHandler(output_handler)

    error_handler = logging.FileHandler(os.path.join(output_directory_location, "coaltime.err"))
    error_handler.setLevel(logging.ERROR)
    logger.addHandler(error_handler)


def parse_config(config_string: str) -> dict[str, dict[str, Any]]:
    """
    Parse estimation settings from a string.

    Parameters
    ----------
    config_string
        Contents of the configuration file to interpret.

    Returns
    -------
    dict[str, dict[str, Any]] - Mapping of section names to their parameters.

    Raises
    ------
    UnspecifiedConfigParameterError
        Raised when the mutation rate is not specified.
    """
    config = configparser.ConfigParser()

    # load in defaults
    config.read_dict(constants.DEFAULT_PARAMETERS)

    config.read_string(config_string)

    parameters = {}
    for key in config:
        if key == configparser.DEFAULTSECT:
            continue
        parameters[key] = {k: ast.literal_eval(v) for k, v in config[key].items()}

    if "mutation_rate" not in parameters["dating"]:
        raise UnspecifiedConfigParameterError(
            "Please specify the mutation rate for analysis: mutation_rate"
        )

    return parameters
