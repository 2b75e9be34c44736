"""This module contains the settings object used in PyPlatinumRTD

To use the settings module instantiate a :class:`.Settings` object and access the settings
as attributes::

    >>> from PyPlatinumRTD.settings import Settings
    >>> settings = Settings()
    >>> settings.util_log_file_backup_count
    1

The settings in the :class:`.Settings` are formed by 2 layers. The bottom layer are the
defaults, that are stored in the `PyPlatinumRTD/defaults.yaml` file. On top of those are
placed the user settings, that originate from the file whose path is in the
`settings.USERSETTINGS_PATH` variable. The user settings file must contain a mapping of
setting names to values. Unknown names and values of the wrong type are ignored.

The settings only concern the logging utilities in :mod:`PyPlatinumRTD.common.utilities`,
which read them at import time. The temperature and resistance conversions do not use
any settings.

"""

import sys
import os
import logging
from threading import Lock
from os import path
from pprint import pformat
from collections import ChainMap
import yaml


# Configure logging
LOG = logging.getLogger(__name__)
LOG.addHandler(logging.NullHandler())


# Form path for defaults and user settings files
THISDIR = path.dirname(path.abspath(__file__))
DEFAULT_PATH = path.join(THISDIR, 'defaults.yaml')

# User settings
if sys.platform.lower().startswith('linux') or sys.platform.lower() == 'darwin':
    USERSETTINGS_PATH = \
        path.join(path.expanduser('~'), '.config', 'PyPlatinumRTD', 'user_settings.yaml')
else:
    USERSETTINGS_PATH = None


def value_str(obj):
    """Return a object and type str or NOT_SET if obj is None"""
    if obj is None:
        return 'NOT_SET'
    else:
        return '{} ({})'.format(obj, obj.__class__.__name__)


def _read_user_settings(filepath, default_settings):
    """Return the user settings in filepath that match a default

    Unknown keys and values whose type does not match the default are logged and left
    out. A value of None is kept, it marks the setting as not set.

    Raises:
        ValueError: If the file does not contain a mapping
    """
    with open(filepath, 'rb') as file_:
        loaded = yaml.safe_load(file_)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = 'The user settings file {} must contain a mapping, not {}'
        raise ValueError(msg.format(filepath, type(loaded).__name__))

    user_settings = {}
    for key, value in loaded.items():
        if key not in default_settings:
            LOG.warning('Ignoring unknown user setting: %s', key)
            continue
        default = default_settings[key]
        if value is not None and default is not None and \
                not isinstance(value, type(default)):
            LOG.warning('Ignoring user setting %s=%r, expected a %s', key, value,
                        type(default).__name__)
            continue
        user_settings[key] = value
    return user_settings


class Settings(object):
    """The PyPlatinumRTD settings object

    The settings are available to get and setable on this object as attributes i.e::

        >>> from PyPlatinumRTD.settings import Settings
        >>> settings = Settings()
        >>> settings.util_log_file_backup_count
        1

    The settings are stored as a ChainMap of the defaults and the user settings and this
    ChainMap object containing the current state of the settings is shared between all
    :class:`.Settings` objects.

    To get a list of all available settings see the :attr:`.Settings.settings_names`
    attribute. To get a pretty print of all settings names, types, default values, user
    setting values (if any) use the :meth:`.Settings.print_settings` method.

    """

    #: The settings ChainMap
    settings = None
    #: The available setting names
    settings_names = None
    # Access lock used to make sure the settings are consistent across threads
    _access_lock = Lock()

    def __init__(self):
        LOG.debug('Init')
        with self._access_lock:
            if self.settings is None:
                self._load_settings()

    def _load_settings(self):
        """Load the defaults and user settings

        This is done when the first Settings object is instantiated
        """
        with open(DEFAULT_PATH, 'rb') as file_:
            default_settings = yaml.safe_load(file_)
        LOG.debug('Loaded defaults: %s', default_settings)

        user_settings = {}
        if USERSETTINGS_PATH is not None and os.path.isfile(USERSETTINGS_PATH) and \
                os.access(USERSETTINGS_PATH, os.R_OK):
            try:
                user_settings = _read_user_settings(USERSETTINGS_PATH, default_settings)
                LOG.info('Loaded user settings %s from path %s', user_settings,
                         USERSETTINGS_PATH)
            except (OSError, ValueError, yaml.YAMLError):
                LOG.exception('Exception during loading of user settings')
        else:
            LOG.debug('No user settings found, file %s does not exist or is not readable',
                      USERSETTINGS_PATH)

        self.__class__.settings = ChainMap(user_settings, default_settings)
        self.__class__.settings_names = list(self.settings.keys())

    def __setattr__(self, key, value):
        """Set attribute"""
        with self._access_lock:
            if key in self.settings:
                self.settings[key] = value
            else:
                msg = 'Only settings that have a default can be set. They are:\n{}'
                # Pretty format the list of names in the exception
                raise AttributeError(msg.format(pformat(self.settings_names)))

    def __getattr__(self, key):
        """Get attribute"""
        with self._access_lock:
            if key in self.settings:
                value = self.settings[key]
            else:
                msg = 'Invalid settings name: {}. Available settings are:\n{}'
                # Pretty format the list of names in the exception
                raise AttributeError(msg.format(key, pformat(self.settings_names)))

            if value is None:
                msg = ('The setting "{}" is indicated in the defaults as *requiring* a '
                       'user setting before it can be used. Fill in the value in the '
                       'user settings file "{}" or instantiate a '
                       'PyPlatinumRTD.settings.Settings object and set the value there, '
                       '*before* attempting to use it.')
                raise AttributeError(msg.format(key, USERSETTINGS_PATH))

            return value

    def print_settings(self):
        """Pretty print of all default and user settings"""
        user_settings, default_settings = self.settings.maps
        print_template = '{{: <{}}}: {{: <{}}}  {{: <{}}}'

        # Calculate key length
        max_key_length = max(len(str(key)) for key in self.settings)

        # Form default values strings (w. type) and calculate max length
        default_strs = {k: value_str(v) for k, v in default_settings.items()}
        # The 7 is the length of NOT_SET and Default
        max_default_value_length = max(7, *[len(v) for v in default_strs.values()])

        # Form settings value strings (w. type) and calculate max length
        user_strs = {k: value_str(v) for k, v in user_settings.items()}
        # The 4 is the length of User
        max_settings_value_length = max([4] + [len(v) for v in user_strs.values()])

        # Format max lengths into print_template
        print_template = print_template.format(
            max_key_length, max_default_value_length, max_settings_value_length
        )

        # Printout the settings
        print('Settings')
        print(print_template.format('Key', 'Default', 'User'))
        print('=' * len(print_template.format('', '', '')))
        for key in sorted(self.settings.keys()):
            default = default_strs[key]
            print(print_template.format(key, default, user_strs.get(key, '')))
