"""This module contains convenience functions for easily setting up a logger with
the :py:mod:`logging` module.

This module uses the following settings from the :class:`.Settings` class:

 * util_log_file_max_bytes (defaults to 1048576)
 * util_log_file_backup_count (defaults to 1)

 .. note:: All of these settings are at present read from the settings module at import
    time, so if it is desired to modify them at run time, it should be done before import

"""

import logging
from logging.handlers import RotatingFileHandler

from ..settings import Settings
from .supported_versions import python3_only
python3_only(__file__)

#: The :class:`.Settings` object used in this module
SETTINGS = Settings()

#: The default maximum size of a log file in bytes
FILE_MAX_BYTES = SETTINGS.util_log_file_max_bytes
#: The default number of rotated log files to keep
FILE_BACKUP_COUNT = SETTINGS.util_log_file_backup_count
#: The format used for all handlers created in this module
LOG_FORMAT = '%(asctime)s:%(name)s: %(levelname)s: %(message)s'


### Log helpers
def _numeric_log_level_from_name(level_name):
    """Return a numeric log level from a log level name"""
    numeric_log_level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(numeric_log_level, int):
        raise ValueError('Invalid logging level "{}"'.format(level_name))
    return numeric_log_level


def _create_handlers(name, terminal_log, file_log, file_name, file_max_bytes,
                     file_backup_count):
    """Build and create common handlers

    Build and create the following common handler of requested:
     * A Stream handler
     * A rotating file handler

    """
    handlers = []

    # Create stream handler
    if terminal_log:
        handlers.append(logging.StreamHandler())

    # Create file handler
    if file_log:
        if file_name is None:
            file_name = name + '.log'
        file_handler = RotatingFileHandler(file_name, maxBytes=file_max_bytes,
                                           backupCount=file_backup_count)
        handlers.append(file_handler)

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    return handlers


### Public log functions
# pylint: disable=too-many-arguments
def get_logger(name, level='INFO', terminal_log=True, file_log=False,
               file_name=None, file_max_bytes=FILE_MAX_BYTES,
               file_backup_count=FILE_BACKUP_COUNT):
    """Setup and return a program logger

    This is meant as a logger to be used in a top level program/script. The logger is set
    up with terminal and file handlers if requested.

    Args:
        name (str): The name of the logger, e.g: 'my_fancy_program'. Passing in an empty
            string will return the root logger. See note below.
        level (str): The level for the logger. Can be either ``'DEBUG'``,
            ``'INFO'``, ``'WARNING'``, ``'ERROR'`` or ``'CRITICAL'``. See
            :py:mod:`logging` for details. Default is ``'INFO'``.
        terminal_log (bool): If ``True`` then logging to a terminal will be
            activated. Default is ``True``.
        file_log (bool): If ``True`` then logging to a file, with log rotation,
            will be activated. If ``file_name`` is not given, then
            ``name + '.log'`` will be used. Default is ``False``.
        file_name (str): Optional file name to log to
        file_max_bytes (int): The maximum size of the log file in bytes. The
            default is the ``util_log_file_max_bytes`` setting.
        file_backup_count (int): The number of backup logs to keep. The default
            is the ``util_log_file_backup_count`` setting.

    Returns:
        :py:class:`logging.Logger`: A logger module with the requested setup

    .. note:: Passing in the empty string as the ``name``, will return the root logger.
       That means that all other library loggers will inherit the level and handlers from
       this logger. See :func:`.activate_library_logging` for a way to activate the
       library loggers from PyPlatinumRTD in a more controlled manner.

    """
    # Get a named logger and set the level
    logger = logging.getLogger(name)
    numeric_log_level = _numeric_log_level_from_name(level)
    logger.setLevel(numeric_log_level)

    handlers = _create_handlers(
        name=name, terminal_log=terminal_log, file_log=file_log, file_name=file_name,
        file_max_bytes=file_max_bytes, file_backup_count=file_backup_count,
    )
    for handler in handlers:
        logger.addHandler(handler)

    return logger


def get_library_logger_names():
    """Return all loggers currently configured in PyPlatinumRTD"""
    logger = logging.getLogger()
    # Somewhat undocumented way of getting all the loggers, let's hope it never changes
    logger_names = logger.manager.loggerDict.keys()
    return [ln for ln in logger_names if ln.startswith('PyPlatinumRTD')]


def print_library_logger_names():
    """Nicely printout all loggers currently configured in PyPlatinumRTD"""
    print('Current PyPlatinumRTD loggers')
    print('=============================')
    for log_name in get_library_logger_names():
        print(" *", log_name)


def activate_library_logging(logger_name, logger_to_inherit_from=None, level=None,
                             terminal_log=True, file_log=False, file_name=None,
                             file_max_bytes=FILE_MAX_BYTES,
                             file_backup_count=FILE_BACKUP_COUNT):
    """Activate logging for a PyPlatinumRTD library logger

    Args:
        logger_name (str): The name of the logger to activate, as returned by
            :func:`.get_library_logger_names`
        logger_to_inherit_from (logging.Logger): (Optional) If this is set, the library
            logger will simply share the handlers that are present in this logger. The
            library to be activated will also inherit the level from this logger, unless
            ``level`` is set, in which case it will override. In case neither ``level``
            nor the level on ``logger_to_inherit_from`` is set, the level will not be
            changed.
        level (str): (Optional) See docstring for :func:`.get_logger`. If
            ``logger_to_inherit_from`` is not set, it will default to 'info'.
        terminal_log (bool): See docstring for :func:`.get_logger`
        file_log (bool): See docstring for :func:`.get_logger`
        file_name (str): See docstring for :func:`.get_logger`
        file_max_bytes (int): See docstring for :func:`.get_logger`
        file_backup_count (int): See docstring for :func:`.get_logger`

    Raises:
        ValueError: If ``logger_name`` is not a currently configured library logger
    """
    # Get hold of the logger to activate
    if logger_name not in get_library_logger_names():
        message = ('The logger "{}" is not among the currently configured PyPlatinumRTD '
                   'library loggers. Make sure you import the relevant PyPlatinumRTD '
                   'module *before* activating it. To get a list of all PyPlatinumRTD '
                   'library loggers call get_library_logger_names function from this '
                   'module')
        raise ValueError(message.format(logger_name))
    logger = logging.getLogger(logger_name)

    # Activate by inheriting handlers and level
    if logger_to_inherit_from is not None:
        if level is not None:
            logger.setLevel(_numeric_log_level_from_name(level))
        elif logger_to_inherit_from.level > 0:
            logger.setLevel(logger_to_inherit_from.level)

        for handler in logger_to_inherit_from.handlers:
            logger.addHandler(handler)
        return

    # Get level and set
    if level is None:
        level = 'info'
    logger.setLevel(_numeric_log_level_from_name(level))

    handlers = _create_handlers(
        name=logger_name, terminal_log=terminal_log, file_log=file_log, file_name=file_name,
        file_max_bytes=file_max_bytes, file_backup_count=file_backup_count,
    )
    for handler in handlers:
        logger.addHandler(handler)
