# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from threading import Lock
from typing import List, Dict, Any, Tuple, Optional

from pydbus.generic import signal

from timesettings.api.decorators import (
    dbus_api,
    auto_dbus,
    last_error,
    wrap_dict_data,
    wrap_exception,
    wrap_warning,
)
from timesettings.locale import LocaleProvider, label_translator
from timesettings.logger_config import get_log_level, set_log_level
from timesettings.sync import SettingsSync


@dbus_api
class DateTime0:
    """
    This is a 0 revision of the date and time settings API.

    It is what the date and time panel of the device settings talks to. Keep implementation out of this file. Methods
    here should only adapt interfaces and reformat data.

    D-Bus calls may arrive from several clients. Calls changing the settings are serialized by a single lock, getters
    read the last loaded state snapshot.
    """

    __INTERFACE__ = "org.timesettings.datetime0"

    PropertiesChanged = signal()

    def __init__(self, sync: SettingsSync, locale_provider: Optional[LocaleProvider] = None):
        self._logger = logging.getLogger(__name__)
        self._last_exception_data: Optional[Exception] = None
        self._lock = Lock()
        self._sync = sync
        self._locale_provider = locale_provider

        self._sync.state_changed.connect(self._on_state_changed)
        self._sync.warnings_changed.connect(self._on_warnings_changed)

    def _on_state_changed(self):
        self.PropertiesChanged(self.__INTERFACE__, {"settings": self._settings()}, [])

    def _on_warnings_changed(self):
        self.PropertiesChanged(self.__INTERFACE__, {"warnings": self._warnings()}, [])

    @property
    def _last_exception(self) -> Optional[Exception]:
        return self._last_exception_data

    @_last_exception.setter
    def _last_exception(self, value: Exception):
        self._logger.error("Date and time request failed: %s", value)
        self._last_exception_data = value
        self.PropertiesChanged(self.__INTERFACE__, {"last_exception": self.last_exception}, [])

    @auto_dbus
    @property
    def last_exception(self) -> Dict[str, Any]:
        """
        Last exception data

        :return: Exception dictionary
        """
        return wrap_dict_data(wrap_exception(self._last_exception_data))

    @auto_dbus
    @property
    def sync_mode(self) -> int:
        """
        Current time synchronization mode

        :return: SyncMode value, AUTO = 0, MANUAL = 1, -1 when not known
        """
        mode = self._sync.state.sync_mode
        return mode.value if mode else -1

    @auto_dbus
    @property
    def auto_sync(self) -> bool:
        """
        Whenever the time is synchronized automatically (NTP)

        :return: True for automatic synchronization, False for manual time setup
        """
        return self._sync.state.sync_auto

    @auto_dbus
    @auto_sync.setter
    @last_error
    def auto_sync(self, value: bool) -> None:
        with self._lock:
            self._sync.commit_sync_mode(value)

    @auto_dbus
    @property
    def time_zone(self) -> str:
        """
        Canonical value of the selected time zone

        :return: Time zone identifier, empty string if the stored time zone is not recognized
        """
        return self._sync.state.time_zone or ""

    @auto_dbus
    @time_zone.setter
    @last_error
    def time_zone(self, value: str) -> None:
        with self._lock:
            self._sync.commit_time_zone(value)

    @auto_dbus
    @property
    def time_zones(self) -> List[Tuple[int, str, str]]:
        """
        Time zone choices

        Labels are translated to the current session language.

        :return: List of (index, value, label)
        """
        localize = label_translator(self._locale_provider)
        return [tuple(option) for option in self._sync.catalog.enumerate_for_display(localize)]

    @auto_dbus
    @property
    def ntp_lan(self) -> bool:
        return self._sync.state.ntp_interfaces.lan

    @auto_dbus
    @property
    def ntp_wan(self) -> bool:
        return self._sync.state.ntp_interfaces.wan

    @auto_dbus
    @property
    def settings(self) -> Dict[str, Any]:
        """
        All date and time settings at once

        :return: Dictionary with sync_mode, auto_sync, time_zone and ntp_interfaces keys
        """
        return self._settings()

    @auto_dbus
    @property
    def warnings(self) -> List[Dict[str, Any]]:
        """
        Problems found while reading the settings

        :return: List of warning dictionaries
        """
        return self._warnings()

    @auto_dbus
    @property
    def log_level(self) -> int:
        """
        Persistent log level of the service

        :return: Log level as defined by the logging module
        """
        return get_log_level()

    @auto_dbus
    @log_level.setter
    @last_error
    def log_level(self, value: int) -> None:
        set_log_level(value)

    @auto_dbus
    @last_error
    def reload(self) -> None:
        """
        Read all settings from the device again
        """
        with self._lock:
            self._sync.load()

    @auto_dbus
    @last_error
    def set_ntp_interfaces(self, lan: bool, wan: bool) -> List[str]:
        """
        Enable local NTP server on interfaces

        :param lan: Listen on LAN
        :param wan: Listen on WAN
        :return: Interface list as stored
        """
        with self._lock:
            return self._sync.commit_ntp_interfaces(lan, wan)

    @auto_dbus
    @last_error
    def reboot(self) -> None:
        """
        Reboot the device
        """
        with self._lock:
            self._sync.reboot()

    def _settings(self) -> Dict[str, Any]:
        state = self._sync.state
        return wrap_dict_data(
            {
                "sync_mode": self.sync_mode,
                "auto_sync": state.sync_auto,
                "time_zone": state.time_zone or "",
                "ntp_interfaces": state.ntp_interfaces.slots,
            }
        )

    def _warnings(self) -> List[Dict[str, Any]]:
        return [wrap_dict_data(wrap_warning(warning)) for warning in self._sync.warnings]
