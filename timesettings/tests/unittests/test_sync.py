# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import unittest
from itertools import product
from unittest.mock import Mock

from timesettings.errors.errors import StoreNotAvailable, TimeZoneNotFound, RebootFailed, StoreWriteFailed
from timesettings.errors.warnings import (
    UnknownSyncModeWarning,
    TimeZoneNotResolvedWarning,
    SettingsNotAvailableWarning,
)
from timesettings.states.sync_mode import SyncMode
from timesettings.store.memory import MemorySettingsStore
from timesettings.sync import SettingsSync, NTPInterfaceSelection
from timesettings.tests.base import TimeSettingsTestCase
from timesettings.timezones.catalog import TimeZoneCatalog


class TestSettingsSync(TimeSettingsTestCase):
    def setUp(self):
        super().setUp()
        self.catalog = TimeZoneCatalog.build()
        self.store = MemorySettingsStore()
        self.sync = SettingsSync(self.store, self.catalog)

    def test_load(self):
        self.store.time_zone = "Europe/Paris"
        self.store.local_ntp_server_interfaces = ["LAN", ""]
        state = self.sync.load()

        self.assertTrue(state.sync_auto)
        self.assertFalse(state.sync_manual)
        self.assertEqual(SyncMode.AUTO, state.sync_mode)
        self.assertEqual("CET", state.time_zone)
        self.assertEqual(NTPInterfaceSelection(lan=True, wan=False), state.ntp_interfaces)
        self.assertFalse(self.sync.warnings)

    def test_load_sync_mode(self):
        for raw, expected in (
            (SyncMode.AUTO, SyncMode.AUTO),
            (SyncMode.MANUAL, SyncMode.MANUAL),
            (0, SyncMode.AUTO),
            (1, SyncMode.MANUAL),
            ("Auto", SyncMode.AUTO),
            ("MANUAL", SyncMode.MANUAL),
        ):
            with self.subTest(raw=raw):
                self.store.sync_mode = raw
                self.assertEqual(expected, self.sync.load_sync_mode())
                self.assertEqual(expected == SyncMode.AUTO, self.sync.state.sync_auto)
                self.assertEqual(expected == SyncMode.MANUAL, self.sync.state.sync_manual)
        self.assertFalse(self.sync.warnings)

    def test_load_sync_mode_unknown(self):
        for raw in (42, "Sometimes", True, 1.5):
            with self.subTest(raw=raw):
                self.sync.warnings.clear()
                self.store.sync_mode = raw
                with self.assertLogs("timesettings.sync", level="WARNING"):
                    self.assertEqual(SyncMode.MANUAL, self.sync.load_sync_mode())
                self.assertFalse(self.sync.state.sync_auto)
                self.assertTrue(self.sync.state.sync_manual)
                self.assertEqual([UnknownSyncModeWarning(repr(raw))], self.sync.warnings)

    def test_commit_sync_mode(self):
        self.store.sync_mode = SyncMode.MANUAL
        self.sync.commit_sync_mode(True)
        self.assertEqual(SyncMode.AUTO, self.store.sync_mode)
        self.assertEqual(SyncMode.AUTO, self.sync.load_sync_mode())

        self.sync.commit_sync_mode(False)
        self.assertEqual(SyncMode.MANUAL, self.store.sync_mode)
        self.assertTrue(self.sync.state.sync_manual)
        self.assertFalse(self.sync.state.sync_auto)

    def test_commit_sync_mode_write_failure(self):
        self.store.fail_writes = True
        with self.assertRaises(StoreWriteFailed):
            self.sync.commit_sync_mode(False)
        self.assertEqual(SyncMode.AUTO, self.store.sync_mode)

    def test_load_time_zone(self):
        self.store.time_zone = "Europe/Paris"
        self.assertEqual("CET", self.sync.load_time_zone_selection())

        self.store.time_zone = "America/Argentina/San_Juan"
        self.assertEqual("America/Manaus", self.sync.load_time_zone_selection())
        self.assertFalse(self.sync.warnings)

    def test_load_time_zone_unknown(self):
        self.store.time_zone = "Europe/Prague"
        self.sync.load_time_zone_selection()
        self.store.time_zone = "Mars/OlympusMons"
        with self.assertLogs("timesettings.sync", level="WARNING"):
            self.assertIsNone(self.sync.load_time_zone_selection())
        self.assertIsNone(self.sync.state.time_zone)
        self.assertEqual([TimeZoneNotResolvedWarning("Mars/OlympusMons")], self.sync.warnings)

    def test_commit_time_zone(self):
        self.assertEqual("CET", self.sync.commit_time_zone("Europe/Paris"))
        self.assertEqual("CET", self.store.time_zone)
        self.assertEqual("CET", self.sync.state.time_zone)

        with self.assertRaises(TimeZoneNotFound):
            self.sync.commit_time_zone("Mars/OlympusMons")
        self.assertEqual("CET", self.store.time_zone)

    def test_commit_every_option(self):
        for option in self.catalog.enumerate_for_display():
            with self.subTest(value=option.value):
                self.assertEqual(option.value, self.sync.commit_time_zone(option.value))
                self.assertEqual(option.value, self.store.time_zone)
                self.assertEqual(option.value, self.sync.load_time_zone_selection())

    def test_load_ntp_interfaces(self):
        for interfaces, expected in (
            (["LAN", ""], NTPInterfaceSelection(True, False)),
            (["", "WAN"], NTPInterfaceSelection(False, True)),
            (["LAN", "WAN"], NTPInterfaceSelection(True, True)),
            (["", ""], NTPInterfaceSelection(False, False)),
            (["lan", "WLAN"], NTPInterfaceSelection(False, False)),
            (["ETH0", "WAN", "LAN"], NTPInterfaceSelection(True, True)),
        ):
            with self.subTest(interfaces=interfaces):
                self.store.local_ntp_server_interfaces = interfaces
                self.assertEqual(expected, self.sync.load_ntp_interfaces())
                self.assertEqual(expected, self.sync.state.ntp_interfaces)

    def test_commit_ntp_interfaces(self):
        for lan, wan in product((False, True), repeat=2):
            with self.subTest(lan=lan, wan=wan):
                slots = self.sync.commit_ntp_interfaces(lan, wan)
                self.assertEqual(2, len(slots))
                self.assertEqual(slots, self.store.local_ntp_server_interfaces)
                self.assertEqual(NTPInterfaceSelection(lan, wan), self.sync.load_ntp_interfaces())

        self.assertEqual(["", "WAN"], self.sync.commit_ntp_interfaces(False, True))

    def test_missing_fields(self):
        store = MemorySettingsStore(sync_mode=None, time_zone=None, local_ntp_server_interfaces=None)
        sync = SettingsSync(store, self.catalog)
        with self.assertLogs("timesettings.sync", level="WARNING"):
            state = sync.load()

        self.assertTrue(state.sync_manual)
        self.assertFalse(state.sync_auto)
        self.assertIsNone(state.time_zone)
        self.assertEqual(NTPInterfaceSelection(), state.ntp_interfaces)
        self.assertEqual(
            ["SyncMode", "TimeZone", "LocalNTPServerInterfaces"],
            [warning.field for warning in sync.warnings],
        )
        for warning in sync.warnings:
            self.assertIsInstance(warning, SettingsNotAvailableWarning)

    def test_missing_store(self):
        sync = SettingsSync(None, self.catalog)
        with self.assertLogs("timesettings.sync", level="WARNING"):
            state = sync.load()
        self.assertTrue(state.sync_manual)
        self.assertIsNone(state.time_zone)
        self.assertEqual(3, len(sync.warnings))

        with self.assertRaises(StoreNotAvailable):
            sync.commit_sync_mode(True)
        with self.assertRaises(StoreNotAvailable):
            sync.commit_time_zone("UTC")
        with self.assertRaises(StoreNotAvailable):
            sync.commit_ntp_interfaces(True, False)
        with self.assertRaises(RebootFailed):
            sync.reboot()

    def test_load_clears_warnings(self):
        self.store.time_zone = "Mars/OlympusMons"
        self.sync.load()
        self.assertEqual(1, len(self.sync.warnings))

        self.store.time_zone = "UTC"
        self.sync.load()
        self.assertFalse(self.sync.warnings)

    def test_shutdown(self):
        self.sync.load()
        self.sync.shutdown()
        with self.assertRaises(StoreNotAvailable):
            self.sync.commit_sync_mode(True)
        with self.assertRaises(RebootFailed):
            self.sync.reboot()
        self.assertEqual(0, self.store.reboot_count)

    def test_reboot(self):
        self.sync.reboot()
        self.assertEqual(1, self.store.reboot_count)

        self.store.fail_reboot = True
        with self.assertLogs("timesettings.sync", level="ERROR"):
            with self.assertRaises(RebootFailed):
                self.sync.reboot()
        self.assertEqual(1, self.store.reboot_count)

    def test_signals(self):
        state_changed = Mock()
        warnings_changed = Mock()
        self.sync.state_changed.connect(state_changed)
        self.sync.warnings_changed.connect(warnings_changed)

        self.sync.load()
        state_changed.assert_called()
        warnings_changed.assert_called()

        state_changed.reset_mock()
        self.sync.commit_time_zone("UTC")
        state_changed.assert_called_once_with()


class TestNTPInterfaceSelection(unittest.TestCase):
    def test_slots(self):
        self.assertEqual(["LAN", ""], NTPInterfaceSelection(lan=True).slots)
        self.assertEqual(["", "WAN"], NTPInterfaceSelection(wan=True).slots)
        self.assertEqual(["", ""], NTPInterfaceSelection().slots)
        self.assertEqual(["LAN", "WAN"], NTPInterfaceSelection(True, True).slots)

    def test_from_slots(self):
        self.assertEqual(NTPInterfaceSelection(True, False), NTPInterfaceSelection.from_slots(["LAN", ""]))
        self.assertEqual(NTPInterfaceSelection(), NTPInterfaceSelection.from_slots([]))


if __name__ == "__main__":
    unittest.main()
