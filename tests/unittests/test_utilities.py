# -*- coding: utf-8 -*-
# pylint: disable=redefined-outer-name

"""Unittests for PyPlatinumRTD.common.utilities"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

# Importing the calculator configures its library logger
from PyPlatinumRTD.auxiliary import rtd_calculator
from PyPlatinumRTD.common import utilities
from PyPlatinumRTD.common.utilities import (
    get_logger, get_library_logger_names, print_library_logger_names,
    activate_library_logging,
)

CALCULATOR_LOGGER = rtd_calculator.LOGGER.name


def test_get_logger(logger_cleanup):
    """Test that a program logger gets the level and a terminal handler"""
    logger_cleanup.append('test_program')
    logger = get_logger('test_program', level='debug')
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.formatter._fmt == utilities.LOG_FORMAT  # pylint: disable=protected-access


def test_get_logger_file(logger_cleanup, tmp_path):
    """Test logging to a rotating file"""
    logger_cleanup.append('test_file_program')
    file_name = str(tmp_path / 'program.log')
    logger = get_logger('test_file_program', terminal_log=False, file_log=True,
                        file_name=file_name, file_max_bytes=1000, file_backup_count=3)
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, RotatingFileHandler)
    assert handler.maxBytes == 1000
    assert handler.backupCount == 3

    logger.info('Resistance is %.2f', 109.73)
    handler.flush()
    with open(file_name) as file_:
        content = file_.read()
    assert 'test_file_program: INFO: Resistance is 109.73' in content


def test_get_logger_file_defaults():
    """Test that the file log defaults come from the settings"""
    assert utilities.FILE_MAX_BYTES == 1048576
    assert utilities.FILE_BACKUP_COUNT == 1


def test_get_logger_invalid_level():
    """Test that an invalid level name raises ValueError"""
    with pytest.raises(ValueError):
        get_logger('test_bad_level', level='loud')


def test_library_logger_names():
    """Test that the library loggers are found"""
    names = get_library_logger_names()
    assert CALCULATOR_LOGGER in names
    assert all(name.startswith('PyPlatinumRTD') for name in names)


def test_print_library_logger_names(capsys):
    """Test the print out of the library logger names"""
    print_library_logger_names()
    out = capsys.readouterr().out
    assert ' * ' + CALCULATOR_LOGGER in out


def test_activate_unknown_library_logger():
    """Test that activating an unknown library logger raises ValueError"""
    with pytest.raises(ValueError):
        activate_library_logging('PyPlatinumRTD.no_such_module')


def test_activate_library_logging(logger_cleanup):
    """Test activating a library logger with its own handlers"""
    logger_cleanup.append(CALCULATOR_LOGGER)
    activate_library_logging(CALCULATOR_LOGGER, level='debug')
    logger = logging.getLogger(CALCULATOR_LOGGER)
    assert logger.level == logging.DEBUG
    assert any(isinstance(handler, logging.StreamHandler)
               and not isinstance(handler, logging.NullHandler)
               for handler in logger.handlers)


def test_activate_library_logging_inherit(logger_cleanup):
    """Test activating a library logger from a program logger"""
    logger_cleanup.extend(['test_parent_program', CALCULATOR_LOGGER])
    parent = get_logger('test_parent_program', level='warning')
    activate_library_logging(CALCULATOR_LOGGER, logger_to_inherit_from=parent)
    logger = logging.getLogger(CALCULATOR_LOGGER)
    assert logger.level == logging.WARNING
    assert parent.handlers[0] in logger.handlers

    # An explicit level overrides the inherited one
    activate_library_logging(CALCULATOR_LOGGER, logger_to_inherit_from=parent,
                             level='error')
    assert logger.level == logging.ERROR
