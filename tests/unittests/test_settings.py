# -*- coding: utf-8 -*-
# pylint: disable=redefined-outer-name,unused-argument

"""Unittests for PyPlatinumRTD.settings"""

import pytest

from PyPlatinumRTD.settings import Settings, value_str


def test_defaults(user_settings_file):
    """Test that the defaults are loaded when there is no user settings file"""
    settings = Settings()
    assert settings.util_log_file_max_bytes == 1048576
    assert settings.util_log_file_backup_count == 1
    assert sorted(Settings.settings_names) == ['util_log_file_backup_count',
                                               'util_log_file_max_bytes']


def test_user_settings_override(user_settings_file):
    """Test that user settings are placed on top of the defaults"""
    user_settings_file.write_text('util_log_file_max_bytes: 2048\n')
    settings = Settings()
    assert settings.util_log_file_max_bytes == 2048
    assert settings.util_log_file_backup_count == 1


def test_user_settings_unknown_keys(user_settings_file, caplog):
    """Test that unknown user settings, solver settings included, are ignored"""
    user_settings_file.write_text(
        'util_log_file_max_bytes: 2048\n'
        'no_such_setting: 1\n'
        'rtd_max_iterations: 3\n'
    )
    settings = Settings()
    assert settings.util_log_file_max_bytes == 2048
    assert 'no_such_setting' not in Settings.settings_names
    assert 'rtd_max_iterations' not in Settings.settings_names
    with pytest.raises(AttributeError):
        getattr(settings, 'no_such_setting')
    assert 'Ignoring unknown user setting: no_such_setting' in caplog.text


def test_user_settings_wrong_type(user_settings_file, caplog):
    """Test that a user value of the wrong type is ignored"""
    user_settings_file.write_text(
        'util_log_file_max_bytes: lots\n'
        'util_log_file_backup_count: 4\n'
    )
    settings = Settings()
    assert settings.util_log_file_max_bytes == 1048576
    assert settings.util_log_file_backup_count == 4
    assert 'util_log_file_max_bytes' in caplog.text


def test_user_settings_broken_file(user_settings_file, caplog):
    """Test that a broken user settings file is logged and the defaults used"""
    user_settings_file.write_text('util_log_file_max_bytes: [\n')
    settings = Settings()
    assert settings.util_log_file_max_bytes == 1048576
    assert 'Exception during loading of user settings' in caplog.text


@pytest.mark.parametrize('content', ['- util_log_file_max_bytes\n- 2048\n', '42\n',
                                     'just some text\n'],
                         ids=['list', 'number', 'string'])
def test_user_settings_not_a_mapping(user_settings_file, caplog, content):
    """Test that a user settings file that is not a mapping is logged and ignored"""
    user_settings_file.write_text(content)
    settings = Settings()
    assert settings.util_log_file_max_bytes == 1048576
    assert settings.util_log_file_backup_count == 1
    assert 'must contain a mapping' in caplog.text


def test_user_settings_empty_file(user_settings_file):
    """Test that an empty user settings file is accepted"""
    user_settings_file.write_text('')
    assert Settings().util_log_file_max_bytes == 1048576


def test_settings_shared(user_settings_file):
    """Test that settings set on one object are seen on the others"""
    first = Settings()
    second = Settings()
    first.util_log_file_backup_count = 7
    assert second.util_log_file_backup_count == 7


def test_set_unknown(user_settings_file):
    """Test that only settings with a default can be set"""
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.no_such_setting = 8


def test_get_unknown(user_settings_file):
    """Test that getting an unknown setting raises"""
    with pytest.raises(AttributeError):
        Settings().no_such_setting  # pylint: disable=expression-not-assigned


def test_setting_requiring_user_value(user_settings_file):
    """Test that a setting with the value None must be filled in before use"""
    user_settings_file.write_text('util_log_file_backup_count: null\n')
    with pytest.raises(AttributeError) as exception:
        Settings().util_log_file_backup_count
    assert 'requiring' in str(exception.value)


def test_print_settings(user_settings_file, capsys):
    """Test the pretty print of the settings"""
    user_settings_file.write_text('util_log_file_backup_count: 5\n')
    Settings().print_settings()
    out = capsys.readouterr().out
    assert out.startswith('Settings')
    line = [ln for ln in out.splitlines()
            if ln.startswith('util_log_file_backup_count')][0]
    assert '1 (int)' in line
    assert '5 (int)' in line


def test_value_str():
    """Test the settings value formatting"""
    assert value_str(None) == 'NOT_SET'
    assert value_str(1.5) == '1.5 (float)'
