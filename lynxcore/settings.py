"""Fixed emulator settings."""

from __future__ import annotations

_BOOL_SETTINGS = {
    "lynx.lowpass": False,
    "lynx.rotateinput": False,
    "cheats": False,
}


def get_setting_bool(name: str) -> bool:
    """Return the boolean setting ``name``; unknown names read as False."""
    return _BOOL_SETTINGS.get(name, False)