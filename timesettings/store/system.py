# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from pathlib import Path
from typing import Any, List, Sequence, Optional

import pydbus
import toml
from gi.repository import GLib

from timesettings import defines
from timesettings.configs.toml import TomlConfig
from timesettings.errors.errors import (
    FieldNotAvailable,
    RebootFailed,
    StoreReadFailed,
    StoreWriteFailed,
)
from timesettings.states.sync_mode import SyncMode
from timesettings.store.base import SettingsStore


class SystemSettingsStore(SettingsStore):
    """
    Settings store backed by the operating system

    Time zone and NTP synchronization are handled by systemd-timedated, reboot by systemd-logind. The list of
    interfaces the local NTP server listens on is kept in a TOML file.
    """

    INTERFACES_SECTION = "ntp"
    INTERFACES_KEY = "local_server_interfaces"

    def __init__(self, bus=None, interfaces_file: Optional[Path] = None):
        self._logger = logging.getLogger(__name__)
        self._bus = bus if bus else pydbus.SystemBus()
        self._interfaces_file = interfaces_file if interfaces_file else defines.ntpInterfacesFile

    def _timedate(self):
        return self._bus.get(defines.timedateService)

    @property
    def sync_mode(self) -> Any:
        try:
            ntp = self._timedate().NTP
        except GLib.GError as exception:
            raise StoreReadFailed("SyncMode") from exception
        return SyncMode.AUTO if ntp else SyncMode.MANUAL

    @sync_mode.setter
    def sync_mode(self, value: Any) -> None:
        try:
            self._timedate().SetNTP(SyncMode.from_raw(value) == SyncMode.AUTO, False)
        except GLib.GError as exception:
            raise StoreWriteFailed("SyncMode") from exception
        self._logger.info("Time synchronization set to %s", value)

    @property
    def time_zone(self) -> str:
        try:
            return self._timedate().Timezone
        except GLib.GError as exception:
            raise StoreReadFailed("TimeZone") from exception

    @time_zone.setter
    def time_zone(self, value: str) -> None:
        try:
            self._timedate().SetTimezone(value, False)
        except GLib.GError as exception:
            raise StoreWriteFailed("TimeZone") from exception
        self._logger.info("Time zone set to %s", value)

    @property
    def local_ntp_server_interfaces(self) -> List[str]:
        try:
            data = TomlConfig(self._interfaces_file).load()
        except (toml.TomlDecodeError, OSError) as exception:
            raise StoreReadFailed("LocalNTPServerInterfaces") from exception
        section = data.get(self.INTERFACES_SECTION, {})
        if not isinstance(section, dict):
            raise StoreReadFailed("LocalNTPServerInterfaces")
        interfaces = section.get(self.INTERFACES_KEY)
        if interfaces is None:
            raise FieldNotAvailable("LocalNTPServerInterfaces")
        if not isinstance(interfaces, list) or not all(isinstance(interface, str) for interface in interfaces):
            raise StoreReadFailed("LocalNTPServerInterfaces")
        return interfaces

    @local_ntp_server_interfaces.setter
    def local_ntp_server_interfaces(self, value: Sequence[str]) -> None:
        interfaces = list(value)
        if len(interfaces) != len(defines.ntpInterfaceSlots):
            raise ValueError(
                f"Local NTP server interfaces need {len(defines.ntpInterfaceSlots)} slots, got {interfaces}"
            )
        config = TomlConfig(self._interfaces_file)
        config.data = {self.INTERFACES_SECTION: {self.INTERFACES_KEY: interfaces}}
        try:
            config.save_raw()
        except OSError as exception:
            raise StoreWriteFailed("LocalNTPServerInterfaces") from exception
        self._logger.info("Local NTP server interfaces set to %s", interfaces)

    def reboot(self) -> None:
        self._logger.info("Requesting reboot")
        try:
            self._bus.get(defines.login1Service).Reboot(False)
        except GLib.GError as exception:
            raise RebootFailed(f"Reboot request failed: {exception}") from exception
