import pytest

from lynxcore.settings import get_setting_bool


@pytest.mark.parametrize("name", ["lynx.lowpass", "lynx.rotateinput", "cheats"])
def test_known_settings_are_off(name):
    assert get_setting_bool(name) is False


def test_unknown_setting_is_off():
    assert get_setting_bool("no.such.setting") is False