# -*- coding: utf-8 -*-
"""File for pytest configuration and common fixtures"""

import logging

import pytest

from PyPlatinumRTD import settings as settings_module
from PyPlatinumRTD.settings import Settings
from PyPlatinumRTD.auxiliary.rtd_calculator import SensorType


@pytest.fixture(params=list(SensorType), ids=[sensor.name for sensor in SensorType])
def sensor_type(request):
    """Sensor type fixture, one for each supported sensor"""
    return request.param


@pytest.fixture
def user_settings_file(tmp_path, monkeypatch):
    """Point the settings at a user settings file in a temporary directory and force
    the shared settings to be reloaded on next instantiation

    Returns the path of the (not yet created) user settings file
    """
    path = tmp_path / 'user_settings.yaml'
    monkeypatch.setattr(settings_module, 'USERSETTINGS_PATH', str(path))
    monkeypatch.setattr(Settings, 'settings', None)
    monkeypatch.setattr(Settings, 'settings_names', None)
    return path


@pytest.fixture
def logger_cleanup():
    """Remove handlers added to loggers during a test"""
    loggers = []
    yield loggers
    for name in loggers:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if not isinstance(handler, logging.NullHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)
