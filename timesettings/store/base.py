# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

from abc import ABC, abstractmethod
from typing import Any, List, Sequence


class SettingsStore(ABC):
    """
    Live date and time configuration of the device

    The store is owned by the host. Code using it keeps a plain reference and never disposes of it.

    Implementations raise NotFound subclasses when a field is missing, DeviceError subclasses when a read, a write or
    the reboot request fails.
    """

    @property
    @abstractmethod
    def sync_mode(self) -> Any:
        """
        Raw time synchronization mode, normally a SyncMode member
        """

    @sync_mode.setter
    @abstractmethod
    def sync_mode(self, value: Any) -> None:
        ...

    @property
    @abstractmethod
    def time_zone(self) -> str:
        ...

    @time_zone.setter
    @abstractmethod
    def time_zone(self, value: str) -> None:
        ...

    @property
    @abstractmethod
    def local_ntp_server_interfaces(self) -> List[str]:
        """
        Interfaces the local NTP server listens on

        The list always has one slot per known interface, disabled slots hold an empty string.
        """

    @local_ntp_server_interfaces.setter
    @abstractmethod
    def local_ntp_server_interfaces(self, value: Sequence[str]) -> None:
        ...

    @abstractmethod
    def reboot(self) -> None:
        ...
