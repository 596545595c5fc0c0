# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from pathlib import Path

import timesettings

swPath = os.path.dirname(timesettings.__file__)
dataPath = os.path.join(swPath, "data")
localedir = os.path.join(swPath, "locales")
gettextDomain = "timesettings"

configDir = Path("/etc/timesettings")
loggingConfig = configDir / "loggerConfig.json"
settingsConfig = configDir / "timesettings.toml"

persistentStorage = Path("/var/timesettings")
ntpInterfacesFile = persistentStorage / "ntp.toml"

# Names of the interfaces the local NTP server may listen on. The order is the slot order of the
# fixed size interface list stored by the host.
lanInterfaceName = "LAN"
wanInterfaceName = "WAN"
ntpInterfaceSlots = (lanInterfaceName, wanInterfaceName)

timedateService = "org.freedesktop.timedate1"
localeService = "org.freedesktop.locale1"
login1Service = "org.freedesktop.login1"

defaultLocale = "C"
