# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from dataclasses import dataclass, field
from typing import Optional, List, Sequence

from PySignal import Signal

from timesettings import defines
from timesettings.errors.errors import (
    NotFound,
    DeviceError,
    RebootFailed,
    StoreNotAvailable,
    UnknownSyncMode,
    TimeZoneNotFound,
)
from timesettings.errors.warnings import (
    TimeSettingsWarning,
    UnknownSyncModeWarning,
    TimeZoneNotResolvedWarning,
    SettingsNotAvailableWarning,
)
from timesettings.states.sync_mode import SyncMode
from timesettings.store.base import SettingsStore
from timesettings.timezones.catalog import TimeZoneCatalog


@dataclass(frozen=True)
class NTPInterfaceSelection:
    """
    Interfaces the local NTP server is enabled on
    """

    lan: bool = False
    wan: bool = False

    @property
    def slots(self) -> List[str]:
        """
        Store representation, one slot per interface, empty string for disabled ones

        The store requires the list length to stay the same regardless of what is enabled.
        """
        return [
            defines.lanInterfaceName if self.lan else "",
            defines.wanInterfaceName if self.wan else "",
        ]

    @staticmethod
    def from_slots(interfaces: Sequence[str]) -> "NTPInterfaceSelection":
        return NTPInterfaceSelection(
            lan=defines.lanInterfaceName in interfaces,
            wan=defines.wanInterfaceName in interfaces,
        )


@dataclass
class DateTimeState:
    """
    Snapshot of what the date and time panel shows
    """

    sync_auto: bool = False
    sync_manual: bool = False
    time_zone: Optional[str] = None
    ntp_interfaces: NTPInterfaceSelection = field(default_factory=NTPInterfaceSelection)

    @property
    def sync_mode(self) -> Optional[SyncMode]:
        if self.sync_auto:
            return SyncMode.AUTO
        if self.sync_manual:
            return SyncMode.MANUAL
        return None


class SettingsSync:
    """
    Keeps date and time settings in sync between the settings store and the panel state

    Reads never raise, problems are logged and kept in :attr:`warnings` while the state falls back to manual mode, no
    time zone and no NTP interfaces. Writes and reboot raise, the caller is responsible for telling the user.

    Calls are expected to be serialized by the caller.
    """

    def __init__(self, store: Optional[SettingsStore], catalog: TimeZoneCatalog):
        self._logger = logging.getLogger(__name__)
        self._store = store
        self._catalog = catalog
        self.state = DateTimeState()
        self.warnings: List[TimeSettingsWarning] = []
        self.state_changed = Signal()
        self.warnings_changed = Signal()

    @property
    def catalog(self) -> TimeZoneCatalog:
        return self._catalog

    def load(self) -> DateTimeState:
        """
        Pull all values from the store
        """
        self.warnings.clear()
        self.load_sync_mode()
        self.load_time_zone_selection()
        self.load_ntp_interfaces()
        self.warnings_changed.emit()
        return self.state

    def shutdown(self) -> None:
        self._logger.info("Releasing settings store")
        self._store = None

    def load_sync_mode(self) -> SyncMode:
        self.state.sync_auto = False
        self.state.sync_manual = False
        try:
            mode = SyncMode.from_raw(self._get_store().sync_mode)
        except UnknownSyncMode as exception:
            self._logger.warning("%s, using manual mode", exception)
            self._add_warning(UnknownSyncModeWarning(repr(exception.value)))
            mode = SyncMode.MANUAL
        except (NotFound, DeviceError) as exception:
            self._logger.warning("Synchronization mode not available, using manual mode: %s", exception)
            self._add_warning(SettingsNotAvailableWarning("SyncMode", str(exception)))
            mode = SyncMode.MANUAL

        self.state.sync_auto = mode == SyncMode.AUTO
        self.state.sync_manual = mode == SyncMode.MANUAL
        self.state_changed.emit()
        return mode

    def commit_sync_mode(self, auto_selected: bool) -> None:
        mode = SyncMode.AUTO if auto_selected else SyncMode.MANUAL
        self._get_store().sync_mode = mode
        self.state.sync_auto = auto_selected
        self.state.sync_manual = not auto_selected
        self._logger.info("Synchronization mode committed: %s", mode.name)
        self.state_changed.emit()

    def load_time_zone_selection(self) -> Optional[str]:
        """
        Get canonical value of the stored time zone

        :return: Canonical time zone value, None if the stored time zone is not known
        """
        self.state.time_zone = None
        try:
            stored = self._get_store().time_zone
        except (NotFound, DeviceError) as exception:
            self._logger.warning("Time zone not available: %s", exception)
            self._add_warning(SettingsNotAvailableWarning("TimeZone", str(exception)))
            self.state_changed.emit()
            return None

        try:
            self.state.time_zone = self._catalog.resolve(stored).canonical
        except TimeZoneNotFound as exception:
            self._logger.warning("%s", exception)
            self._add_warning(TimeZoneNotResolvedWarning(stored))
        self.state_changed.emit()
        return self.state.time_zone

    def commit_time_zone(self, time_zone: str) -> str:
        """
        Store time zone selection

        :param time_zone: Any identifier of the group to select
        :return: Canonical value written to the store
        :raises TimeZoneNotFound: when the identifier is not known
        """
        value = self._catalog.resolve(time_zone).canonical
        self._get_store().time_zone = value
        self.state.time_zone = value
        self._logger.info("Time zone committed: %s", value)
        self.state_changed.emit()
        return value

    def load_ntp_interfaces(self) -> NTPInterfaceSelection:
        self.state.ntp_interfaces = NTPInterfaceSelection()
        try:
            interfaces = self._get_store().local_ntp_server_interfaces
        except (NotFound, DeviceError) as exception:
            self._logger.warning("Local NTP server interfaces not available: %s", exception)
            self._add_warning(SettingsNotAvailableWarning("LocalNTPServerInterfaces", str(exception)))
            self.state_changed.emit()
            return self.state.ntp_interfaces

        for interface in interfaces:
            if interface and interface not in defines.ntpInterfaceSlots:
                self._logger.debug("Ignoring unknown NTP server interface: %s", interface)
        self.state.ntp_interfaces = NTPInterfaceSelection.from_slots(interfaces)
        self.state_changed.emit()
        return self.state.ntp_interfaces

    def commit_ntp_interfaces(self, lan: bool, wan: bool) -> List[str]:
        selection = NTPInterfaceSelection(lan=lan, wan=wan)
        slots = selection.slots
        self._get_store().local_ntp_server_interfaces = slots
        self.state.ntp_interfaces = selection
        self._logger.info("Local NTP server interfaces committed: %s", slots)
        self.state_changed.emit()
        return slots

    def reboot(self) -> None:
        try:
            store = self._get_store()
        except StoreNotAvailable as exception:
            self._logger.error("Reboot requested without settings store")
            raise RebootFailed(str(exception)) from exception
        self._logger.info("Rebooting the device")
        try:
            store.reboot()
        except DeviceError:
            self._logger.exception("Reboot failed")
            raise

    def _get_store(self) -> SettingsStore:
        if self._store is None:
            raise StoreNotAvailable()
        return self._store

    def _add_warning(self, warning: TimeSettingsWarning) -> None:
        self.warnings.append(warning)
        self.warnings_changed.emit()
