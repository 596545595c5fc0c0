# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from typing import Any, List, Sequence, Optional

from timesettings.errors.errors import FieldNotAvailable, RebootFailed, StoreWriteFailed
from timesettings.states.sync_mode import SyncMode
from timesettings.store.base import SettingsStore


class MemorySettingsStore(SettingsStore):
    """
    Settings store kept in memory

    Used by the virtual device. Fields set to None are reported as missing.
    """

    def __init__(
        self,
        sync_mode: Any = SyncMode.AUTO,
        time_zone: Optional[str] = "UTC",
        local_ntp_server_interfaces: Optional[Sequence[str]] = ("", ""),
    ):
        self._logger = logging.getLogger(__name__)
        self._sync_mode = sync_mode
        self._time_zone = time_zone
        self._interfaces = list(local_ntp_server_interfaces) if local_ntp_server_interfaces is not None else None
        self.reboot_count = 0
        self.fail_reboot = False
        self.fail_writes = False

    @property
    def sync_mode(self) -> Any:
        if self._sync_mode is None:
            raise FieldNotAvailable("SyncMode")
        return self._sync_mode

    @sync_mode.setter
    def sync_mode(self, value: Any) -> None:
        self._check_write("SyncMode")
        self._sync_mode = value

    @property
    def time_zone(self) -> str:
        if self._time_zone is None:
            raise FieldNotAvailable("TimeZone")
        return self._time_zone

    @time_zone.setter
    def time_zone(self, value: str) -> None:
        self._check_write("TimeZone")
        self._time_zone = value

    @property
    def local_ntp_server_interfaces(self) -> List[str]:
        if self._interfaces is None:
            raise FieldNotAvailable("LocalNTPServerInterfaces")
        return list(self._interfaces)

    @local_ntp_server_interfaces.setter
    def local_ntp_server_interfaces(self, value: Sequence[str]) -> None:
        self._check_write("LocalNTPServerInterfaces")
        self._interfaces = list(value)

    def reboot(self) -> None:
        if self.fail_reboot:
            raise RebootFailed("Reboot request rejected")
        self.reboot_count += 1
        self._logger.info("Reboot requested (%d)", self.reboot_count)

    def _check_write(self, field: str) -> None:
        if self.fail_writes:
            raise StoreWriteFailed(field)
