# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import unittest

import pydbus
from gi.repository import GLib

from timesettings import defines
from timesettings.api.datetime0 import DateTime0
from timesettings.errors.errors import RebootFailed
from timesettings.locale import Locale1Provider
from timesettings.states.sync_mode import SyncMode
from timesettings.store.memory import MemorySettingsStore
from timesettings.store.system import SystemSettingsStore
from timesettings.sync import SettingsSync
from timesettings.tests.base import TimeSettingsTestCaseDBus
from timesettings.timezones.catalog import TimeZoneCatalog


class TestIntegrationSystemStore(TimeSettingsTestCaseDBus):
    def setUp(self):
        super().setUp()
        self.store = SystemSettingsStore(pydbus.SystemBus())
        self.sync = SettingsSync(self.store, TimeZoneCatalog.build())

    def test_load(self):
        state = self.sync.load()
        self.assertTrue(state.sync_auto)
        self.assertEqual("CET", state.time_zone)
        # Interface file does not exist yet
        self.assertFalse(state.ntp_interfaces.lan)
        self.assertEqual(1, len(self.sync.warnings))

    def test_commit(self):
        self.sync.commit_sync_mode(False)
        self.assertFalse(self.time_date.NTP)
        self.assertEqual(SyncMode.MANUAL, self.store.sync_mode)

        self.sync.commit_time_zone("Europe/Madrid")
        self.assertEqual("CET", self.time_date.Timezone)

        self.sync.commit_ntp_interfaces(True, True)
        self.assertTrue(defines.ntpInterfacesFile.exists())
        self.assertEqual(["LAN", "WAN"], self.store.local_ntp_server_interfaces)

    def test_reboot(self):
        self.sync.reboot()
        self.assertEqual(1, self.login1.reboot_count)

        self.login1.refuse = True
        with self.assertRaises(RebootFailed):
            self.sync.reboot()
        self.assertEqual(1, self.login1.reboot_count)

    def test_locale(self):
        provider = Locale1Provider(pydbus.SystemBus())
        self.assertEqual("C", provider.current_locale())
        self.locale.SetLocale(["LANG=cs_CZ.UTF-8"], False)
        self.assertEqual("cs_CZ", provider.current_locale())


class TestIntegrationDateTime0(TimeSettingsTestCaseDBus):
    def setUp(self):
        super().setUp()
        self.store = MemorySettingsStore(SyncMode.AUTO, "Europe/Prague", ["LAN", ""])
        self.sync = SettingsSync(self.store, TimeZoneCatalog.build())
        self.sync.load()
        self.datetime0_dbus = pydbus.SystemBus().publish(DateTime0.__INTERFACE__, DateTime0(self.sync))
        self.datetime0: DateTime0 = pydbus.SystemBus().get(DateTime0.__INTERFACE__)

    def tearDown(self):
        self.datetime0_dbus.unpublish()
        super().tearDown()

    def test_read(self):
        self.assertEqual(SyncMode.AUTO.value, self.datetime0.sync_mode)
        self.assertTrue(self.datetime0.auto_sync)
        self.assertEqual("Europe/Budapest", self.datetime0.time_zone)
        self.assertTrue(self.datetime0.ntp_lan)
        self.assertFalse(self.datetime0.ntp_wan)
        self.assertEqual(
            {"sync_mode": 0, "auto_sync": True, "time_zone": "Europe/Budapest", "ntp_interfaces": ["LAN", ""]},
            self.datetime0.settings,
        )
        self.assertEqual([], self.datetime0.warnings)

    def test_time_zones(self):
        time_zones = self.datetime0.time_zones
        self.assertEqual(len(self.sync.catalog), len(time_zones))
        self.assertEqual((0, "UTC", "(UTC) Coordinated Universal Time"), tuple(time_zones[0]))

    def test_write(self):
        self.datetime0.auto_sync = False
        self.assertEqual(SyncMode.MANUAL, self.store.sync_mode)

        self.datetime0.time_zone = "Europe/Paris"
        self.assertEqual("CET", self.store.time_zone)
        self.assertEqual("CET", self.datetime0.time_zone)

        self.assertEqual(["", "WAN"], self.datetime0.set_ntp_interfaces(False, True))
        self.assertEqual(["", "WAN"], self.store.local_ntp_server_interfaces)

    def test_write_invalid_time_zone(self):
        with self.assertRaises(GLib.GError):
            self.datetime0.time_zone = "Mars/OlympusMons"
        self.assertEqual("Europe/Budapest", self.store.time_zone)
        self.assertEqual("Mars/OlympusMons", self.datetime0.last_exception["time_zone"])

    def test_reboot(self):
        self.datetime0.reboot()
        self.assertEqual(1, self.store.reboot_count)


if __name__ == "__main__":
    unittest.main()
