# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

from enum import Enum, unique


@unique
class ErrorCode(Enum):
    """
    Error and warning codes published over the API

    Value is a tuple of numeric code and a human readable message.
    """

    NONE = (0, "No error")
    UNKNOWN = (1, "Unknown error")

    # NotFound
    NOT_FOUND = (100, "Requested item was not found")
    STORE_NOT_AVAILABLE = (101, "Settings store reference is not defined")
    TIME_ZONE_NOT_FOUND = (102, "Time zone is not recognized")
    FIELD_NOT_AVAILABLE = (103, "Settings store field is not available")

    # InvalidState
    INVALID_STATE = (200, "Settings store is in an invalid state")
    UNKNOWN_SYNC_MODE = (201, "Unknown time synchronization mode")

    # DeviceError
    DEVICE_ERROR = (300, "Device action failed")
    STORE_WRITE_FAILED = (301, "Failed to write settings")
    STORE_READ_FAILED = (302, "Failed to read settings")
    REBOOT_FAILED = (303, "Failed to reboot the device")

    CONFIG_EXCEPTION = (400, "Configuration error")
    FAILED_TO_SET_LOGLEVEL = (401, "Failed to set log level")
    DBUS_MAPPING_ERROR = (402, "Failed to map value to D-Bus")

    NONE_WARNING = (1000, "No warning")
    UNKNOWN_WARNING = (1001, "Unknown warning")
    UNKNOWN_SYNC_MODE_WARNING = (1002, "Unknown synchronization mode, using manual mode")
    TIME_ZONE_NOT_RESOLVED_WARNING = (1003, "Time zone not recognized, no time zone selected")
    SETTINGS_NOT_AVAILABLE_WARNING = (1004, "Settings could not be read")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]
