# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass
from functools import partial
from typing import Any

from timesettings.errors.codes import ErrorCode


def with_code(code: ErrorCode):
    """
    Class decorator used to add CODE to an Exception

    :param code: Exception error code
    :return: Decorated class
    """

    def decor(cls):
        if not isinstance(code, ErrorCode):
            raise ValueError(f'with_code requires valid error code, got: "{code}"')
        cls.CODE = code
        cls.MESSAGE = code.message
        cls.__name__ = f"e{code.code}.{cls.__name__}"
        return cls

    return decor


def get_exception_code(exception: Exception) -> ErrorCode:
    return getattr(exception, "CODE") if hasattr(exception, "CODE") else ErrorCode.UNKNOWN


exception_dataclass = partial(dataclass, frozen=True, eq=True)


@with_code(ErrorCode.UNKNOWN)
class TimeSettingsException(Exception):
    """
    General exception for date and time settings
    """

    CODE = ErrorCode.UNKNOWN


@with_code(ErrorCode.CONFIG_EXCEPTION)
class ConfigException(TimeSettingsException):
    """
    Exception used to signal problems with configuration
    """


@with_code(ErrorCode.FAILED_TO_SET_LOGLEVEL)
class FailedToSetLogLevel(TimeSettingsException):
    pass


@with_code(ErrorCode.DBUS_MAPPING_ERROR)
class DBusMappingException(TimeSettingsException):
    pass


@with_code(ErrorCode.NOT_FOUND)
class NotFound(TimeSettingsException):
    """
    Something the settings depend on is missing
    """


@with_code(ErrorCode.STORE_NOT_AVAILABLE)
class StoreNotAvailable(NotFound):
    def __init__(self, message: str = "Settings store reference not defined"):
        super().__init__(message)


@with_code(ErrorCode.TIME_ZONE_NOT_FOUND)
@exception_dataclass
class TimeZoneNotFound(NotFound):
    time_zone: str

    def __str__(self):
        return f"Time zone {self.time_zone} is not recognized as a valid time zone."


@with_code(ErrorCode.FIELD_NOT_AVAILABLE)
@exception_dataclass
class FieldNotAvailable(NotFound):
    field: str

    def __str__(self):
        return f"Settings store field {self.field} is not available"


@with_code(ErrorCode.INVALID_STATE)
class InvalidState(TimeSettingsException):
    """
    Store holds a value this code does not understand
    """


@with_code(ErrorCode.UNKNOWN_SYNC_MODE)
@exception_dataclass
class UnknownSyncMode(InvalidState):
    value: Any

    def __str__(self):
        return f"Unknown synchronization mode: {self.value!r}"


@with_code(ErrorCode.DEVICE_ERROR)
class DeviceError(TimeSettingsException):
    """
    Device action or settings write failed
    """


@with_code(ErrorCode.STORE_WRITE_FAILED)
@exception_dataclass
class StoreWriteFailed(DeviceError):
    field: str

    def __str__(self):
        return f"Failed to write {self.field} to the settings store"


@with_code(ErrorCode.STORE_READ_FAILED)
@exception_dataclass
class StoreReadFailed(DeviceError):
    field: str

    def __str__(self):
        return f"Failed to read {self.field} from the settings store"


@with_code(ErrorCode.REBOOT_FAILED)
class RebootFailed(DeviceError):
    pass
