# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass

from timesettings.errors.codes import ErrorCode
from timesettings.errors.errors import with_code


@with_code(ErrorCode.UNKNOWN_WARNING)
@dataclass(frozen=True)
class TimeSettingsWarning(Warning):
    """
    Date and time settings warning
    """


@with_code(ErrorCode.UNKNOWN_SYNC_MODE_WARNING)
@dataclass(frozen=True)
class UnknownSyncModeWarning(TimeSettingsWarning):
    value: str


@with_code(ErrorCode.TIME_ZONE_NOT_RESOLVED_WARNING)
@dataclass(frozen=True)
class TimeZoneNotResolvedWarning(TimeSettingsWarning):
    time_zone: str


@with_code(ErrorCode.SETTINGS_NOT_AVAILABLE_WARNING)
@dataclass(frozen=True)
class SettingsNotAvailableWarning(TimeSettingsWarning):
    field: str
    reason: str
