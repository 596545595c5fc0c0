# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from timesettings import defines
from timesettings.configs.toml import TomlConfig
from timesettings.errors.errors import ConfigException
from timesettings.timezones.catalog import MatchPolicy


@dataclass
class TimeSettingsConfig:
    """
    Service configuration

    Example file::

        [timezones]
        match_policy = "exact"

        [ntp]
        interfaces_file = "/var/timesettings/ntp.toml"

        [locale]
        fallback = "C"
    """

    match_policy: MatchPolicy = MatchPolicy.EXACT
    ntp_interfaces_file: Path = field(default_factory=lambda: defines.ntpInterfacesFile)
    fallback_locale: str = defines.defaultLocale

    @classmethod
    def load(cls, filename: Optional[Path] = None) -> "TimeSettingsConfig":
        """
        Read configuration file, missing keys keep their defaults

        :param filename: Configuration file, defaults to defines.settingsConfig
        :return: Configuration instance
        """
        data = TomlConfig(filename if filename else defines.settingsConfig).load()
        config = cls()

        try:
            raw_policy = data.get("timezones", {}).get("match_policy")
            if raw_policy is not None:
                config.match_policy = MatchPolicy(str(raw_policy).lower())
            interfaces_file = data.get("ntp", {}).get("interfaces_file")
            if interfaces_file:
                config.ntp_interfaces_file = Path(interfaces_file)
            fallback_locale = data.get("locale", {}).get("fallback")
            if fallback_locale:
                config.fallback_locale = str(fallback_locale)
        except (ValueError, AttributeError) as exception:
            raise ConfigException(f"Invalid time settings configuration: {exception}") from exception

        return config
