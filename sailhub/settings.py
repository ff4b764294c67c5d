"""Persistent application settings stored in an INI file."""

from __future__ import annotations

import configparser
import enum
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Optional

__all__ = ["Settings", "UpdateInterval", "default_config_dir"]

_SECTION = "APP"
_PRIMARY_FILE = Path("org.nubecula") / "sailhub" / "sailhub.conf"
_FALLBACK_FILE = Path("harbour-sailhub") / "harbour-sailhub.conf"


class UpdateInterval(enum.IntEnum):
    """How often notifications are refreshed in the background."""

    FIVE_MINUTES = 0
    TEN_MINUTES = 1
    FIFTEEN_MINUTES = 2
    THIRTY_MINUTES = 3
    ONE_HOUR = 4


_FREQUENCIES = {
    UpdateInterval.FIVE_MINUTES: timedelta(minutes=5),
    UpdateInterval.TEN_MINUTES: timedelta(minutes=10),
    UpdateInterval.FIFTEEN_MINUTES: timedelta(minutes=15),
    UpdateInterval.THIRTY_MINUTES: timedelta(minutes=30),
    UpdateInterval.ONE_HOUR: timedelta(hours=1),
}


def default_config_dir() -> Path:
    """Return the user's configuration directory."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def _to_int(text: Optional[str], default: int) -> int:
    if text is None:
        return default
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _to_bool(text: Optional[str], default: bool) -> bool:
    if text is None:
        return default
    return text.strip().lower() not in ("", "false", "0")


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    return parser


@dataclass
class Settings:
    """User settings: page size, notification behaviour and access token."""

    pagination: int = 20
    notify: bool = False
    notification_update_interval: int = UpdateInterval.FIFTEEN_MINUTES
    access_token: str = ""

    @property
    def frequency(self) -> timedelta:
        """Time between background refreshes; 15 minutes if the interval is unknown."""
        try:
            return _FREQUENCIES[UpdateInterval(self.notification_update_interval)]
        except ValueError:
            return _FREQUENCIES[UpdateInterval.FIFTEEN_MINUTES]

    @classmethod
    def load(cls, config_dir=None) -> "Settings":
        """Read settings from ``config_dir``, falling back to defaults."""
        base = Path(config_dir) if config_dir is not None else default_config_dir()
        path = base / _PRIMARY_FILE
        if not path.exists():
            path = base / _FALLBACK_FILE

        parser = _new_parser()
        if path.exists():
            parser.read(path, encoding="utf-8")
        section = parser[_SECTION] if parser.has_section(_SECTION) else {}

        return cls(
            pagination=_to_int(section.get("pagination"), 20) & 0xFF,
            notification_update_interval=_to_int(
                section.get("notification_update_interval"),
                UpdateInterval.FIFTEEN_MINUTES,
            )
            & 0xFF,
            notify=_to_bool(section.get("notify"), False),
            access_token=section.get("token", ""),
        )

    def save(self, config_dir=None) -> Path:
        """Write settings to ``config_dir`` and return the file written.

        Other groups and keys already in the file are kept.
        """
        base = Path(config_dir) if config_dir is not None else default_config_dir()
        path = base / _PRIMARY_FILE
        parser = _new_parser()
        if path.exists():
            parser.read(path, encoding="utf-8")
        if not parser.has_section(_SECTION):
            parser.add_section(_SECTION)
        section = parser[_SECTION]
        section["pagination"] = str(self.pagination)
        section["notify"] = "true" if self.notify else "false"
        section["notification_update_interval"] = str(int(self.notification_update_interval))
        section["token"] = self.access_token

        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            parser.write(handle, space_around_delimiters=False)
        return path