# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

from enum import unique, Enum
from typing import Any

from timesettings.errors.errors import UnknownSyncMode


@unique
class SyncMode(Enum):
    """
    Time synchronization mode of the device clock
    """

    AUTO = 0
    MANUAL = 1

    @staticmethod
    def from_raw(value: Any) -> "SyncMode":
        """
        Map raw store value to synchronization mode

        Accepts the enum itself, its numeric value or its (case insensitive) name.

        :param value: Raw value as provided by the settings store
        :return: Synchronization mode
        :raises UnknownSyncMode: when the value is not recognized
        """
        if isinstance(value, SyncMode):
            return value
        # bool is an int, but True/False are not mode values
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return SyncMode(value)
            except ValueError as exception:
                raise UnknownSyncMode(value) from exception
        if isinstance(value, str):
            try:
                return SyncMode[value.strip().upper()]
            except KeyError as exception:
                raise UnknownSyncMode(value) from exception
        raise UnknownSyncMode(value)
