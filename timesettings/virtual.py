#!/usr/bin/env python

# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

"""
This module is used to run a virtual date and time service. It publishes the same API as main.py, but on the session
bus and with settings kept in memory, so that it can run on a desktop computer. This mode is intended for GUI testing.
"""

import logging
import signal
import warnings

from gi.repository import GLib
from pydbus import SessionBus

from timesettings import test_runtime
from timesettings.api.datetime0 import DateTime0
from timesettings.locale import StaticLocaleProvider
from timesettings.states.sync_mode import SyncMode
from timesettings.store.memory import MemorySettingsStore
from timesettings.sync import SettingsSync
from timesettings.timezones.catalog import TimeZoneCatalog

logging.basicConfig(format="%(asctime)s - %(levelname)s - %(name)s - %(message)s", level=logging.DEBUG)

# Display warnings only once
warnings.simplefilter("once")


class Virtual:
    def __init__(self):
        self.sync = None
        self.datetime0 = None
        self.registration = None
        self.glib_loop = None

    def __call__(self):
        test_runtime.testing = True
        store = MemorySettingsStore(
            sync_mode=SyncMode.AUTO,
            time_zone="Europe/Prague",
            local_ntp_server_interfaces=["LAN", ""],
        )
        self.sync = SettingsSync(store, TimeZoneCatalog.build())
        self.sync.load()

        self.datetime0 = DateTime0(self.sync, StaticLocaleProvider())
        self.registration = SessionBus().publish(DateTime0.__INTERFACE__, self.datetime0)

        self.glib_loop = GLib.MainLoop()
        GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGINT, self.tear_down)
        GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGTERM, self.tear_down)

        print("Running glib mainloop")
        self.glib_loop.run()

    def tear_down(self):
        self.registration.unpublish()
        self.sync.shutdown()
        self.glib_loop.quit()
        return GLib.SOURCE_REMOVE


if __name__ == "__main__":
    Virtual()()
