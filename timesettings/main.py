#!/usr/bin/env python

# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import signal

from gi.repository import GLib
from pydbus import SystemBus

from timesettings.api.datetime0 import DateTime0
from timesettings.configs.settings import TimeSettingsConfig
from timesettings.locale import Locale1Provider
from timesettings.logger_config import configure_log
from timesettings.store.system import SystemSettingsStore
from timesettings.sync import SettingsSync
from timesettings.timezones.catalog import TimeZoneCatalog


def main():
    log_from_config = configure_log()
    logger = logging.getLogger()

    if log_from_config:
        logger.info("Logging configuration read from configuration file")
    else:
        logger.info("Embedded logger configuration was used")

    logger.info("Logging is set to level %s", logging.getLevelName(logger.level))

    config = TimeSettingsConfig.load()
    logger.info("Time zone match policy: %s", config.match_policy.value)

    bus = SystemBus()
    catalog = TimeZoneCatalog.build(config.match_policy)
    sync = SettingsSync(SystemSettingsStore(bus, config.ntp_interfaces_file), catalog)
    sync.load()

    datetime0 = DateTime0(sync, Locale1Provider(bus, config.fallback_locale))
    registration = bus.publish(DateTime0.__INTERFACE__, datetime0)

    loop = GLib.MainLoop()
    GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGTERM, loop.quit)
    GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGINT, loop.quit)

    logger.info("Running DBus event loop")
    try:
        loop.run()
    finally:
        registration.unpublish()
        sync.shutdown()
        logger.info("Date and time settings service stopped")


if __name__ == "__main__":
    main()
